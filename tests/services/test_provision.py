"""Identity Provisioning — whitelisting usernames ahead of registration."""

from hardball.core.domain_types import RegistrationStatus
from hardball.provision import provision_usernames


async def test_provision_usernames_then_register(sql_uow, sql_service, capsys):
    existing = await provision_usernames(sql_uow, ["alice", "bob"])

    assert existing == []
    assert "added   alice" in capsys.readouterr().out
    result = await sql_service.register("alice", "pw")
    assert result.status is RegistrationStatus.CREATED


async def test_provision_reports_existing(sql_uow, provision, capsys):
    await provision("alice")

    existing = await provision_usernames(sql_uow, ["alice", "carol"])

    assert existing == ["alice"]
    out = capsys.readouterr().out
    assert "exists  alice" in out
    assert "added   carol" in out


async def test_provision_does_not_register(sql_uow, sql_service):
    await provision_usernames(sql_uow, ["dave"])

    assert not await sql_service.authorize("dave:anything")
    login = await sql_service.login("dave", "")
    assert login.token is None

"""Post ORM — news feed entries (table `posts`).

Invariants:
    - publish_date and create_date are millisecond epoch timestamps (BIGINT)
    - id is an autoincrement integer assigned by the database
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hardball.db.base import Base


class Post(Base):
    """Post entry — title/body plus publish and create timestamps."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    publish_date: Mapped[int] = mapped_column(
        BigInteger, nullable=False, index=True,
    )
    create_date: Mapped[int] = mapped_column(BigInteger, nullable=False)

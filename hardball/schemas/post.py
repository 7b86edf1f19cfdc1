"""Post Schemas — camelCase wire format for news feed posts.

Invariants:
    - publishDate / createDate are millisecond epoch integers
    - PostCreate requires all four fields; PostUpdate never changes createDate
"""

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Body of POST /api/posts/create."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    body: str
    publish_date: int = Field(alias="publishDate")
    create_date: int = Field(alias="createDate")


class PostUpdate(BaseModel):
    """Body of PUT /api/posts/modify/{postId}. createDate is accepted and ignored."""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    body: str
    publish_date: int = Field(alias="publishDate")
    create_date: int | None = Field(None, alias="createDate")

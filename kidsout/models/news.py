from pydantic import BaseModel, ConfigDict


class NewsItem(BaseModel):
    model_config = ConfigDict(extra="allow")
    id: int | str
    title: str | None = None
    body: str | None = None
    published_at: str | None = None  # ISO date string
    is_read: bool | None = None

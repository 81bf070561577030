from datetime import datetime
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

SAFE_URL_SCHEMES = ("", "http", "https", "mailto")


def _is_safe_url(url: str) -> bool:
    """True for relative, http(s) and mailto URLs. Script URLs such as javascript: fail."""
    try:
        scheme = urlsplit(url.strip()).scheme
    except ValueError:
        return False
    return scheme.lower() in SAFE_URL_SCHEMES


class ArticleSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    # NewsAPI sends null, a number or a string here depending on the source
    id: int | float | str | None = None
    name: str = ""


class Article(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: ArticleSource = Field(default_factory=ArticleSource)
    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    image_url: str | None = Field(default=None, alias="urlToImage")
    published_at: datetime | None = Field(default=None, alias="publishedAt")
    content: str | None = None

    @field_validator("url")
    @classmethod
    def safe_link_url(cls, v: str | None) -> str | None:
        if v is not None and not _is_safe_url(v):
            return "#"
        return v

    @field_validator("image_url")
    @classmethod
    def safe_image_url(cls, v: str | None) -> str | None:
        if v is not None and not _is_safe_url(v):
            return None
        return v

    def formatted_published_date(self) -> str:
        """Publish date as "Month Day, Year", e.g. "January 2, 2006"."""
        if self.published_at is None:
            return ""
        d = self.published_at
        return f"{d:%B} {d.day}, {d.year}"


class ResultSet(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status: str = ""
    total_results: int = Field(default=0, alias="totalResults")
    articles: list[Article] = Field(default_factory=list)

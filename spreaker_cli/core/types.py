"""
Core types for Spreaker API payloads.

These dataclasses provide type safety and IDE support for API responses.
"""

import urllib.parse
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Generic, TypeVar

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an API timestamp ("2020-04-20 18:00:00"); None stays None."""
    if not value:
        return None
    return datetime.strptime(value, TIMESTAMP_FORMAT)


# =============================================================================
# Field presence
# =============================================================================


class _Unset:
    """Marks a change-set field that was not explicitly provided."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def form_value(value: Any) -> str:
    """Render a value as a form field string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


@dataclass
class ChangeSet:
    """
    Base class for update payloads.

    Only fields that were explicitly set (anything other than UNSET) are
    transmitted, so False, 0 and "" can be sent deliberately.
    """

    def to_fields(self) -> dict[str, str]:
        return {f.name: form_value(getattr(self, f.name)) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.to_fields()


# =============================================================================
# Pagination
# =============================================================================


T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a list endpoint."""

    items: list[T]
    next_url: str = ""

    @property
    def has_more(self) -> bool:
        """Check if there are more results."""
        return self.next_url != ""

    def next_params(self) -> dict[str, str]:
        """Continuation query parameters embedded in next_url (e.g. last_id)."""
        if not self.next_url:
            return {}
        query = urllib.parse.urlsplit(self.next_url).query
        return dict(urllib.parse.parse_qsl(query, keep_blank_values=True))


@dataclass
class PaginationParams:
    """Page size and offset; zero values are omitted from the query."""

    limit: int = 0
    offset: int = 0

    def to_dict(self) -> dict[str, str]:
        params = {}
        if self.limit > 0:
            params["limit"] = str(self.limit)
        if self.offset > 0:
            params["offset"] = str(self.offset)
        return params


# =============================================================================
# User Types
# =============================================================================


@dataclass
class User:
    """A Spreaker user."""

    user_id: int
    fullname: str = ""
    username: str = ""
    description: str = ""
    site_url: str = ""
    image_url: str = ""
    image_original_url: str = ""
    kind: str = ""
    plan: str = ""
    followers_count: int = 0
    followings_count: int = 0
    contact_email: str | None = None
    gender: str | None = None
    birthday: str | None = None
    location: str | None = None
    location_latitude: float | None = None
    location_longitude: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Create from API response dict."""
        return cls(
            user_id=int(data["user_id"]),
            fullname=data.get("fullname") or "",
            username=data.get("username") or "",
            description=data.get("description") or "",
            site_url=data.get("site_url") or "",
            image_url=data.get("image_url") or "",
            image_original_url=data.get("image_original_url") or "",
            kind=data.get("kind") or "",
            plan=data.get("plan") or "",
            followers_count=data.get("followers_count") or 0,
            followings_count=data.get("followings_count") or 0,
            contact_email=data.get("contact_email"),
            gender=data.get("gender"),
            birthday=data.get("birthday"),
            location=data.get("location"),
            location_latitude=data.get("location_latitude"),
            location_longitude=data.get("location_longitude"),
        )

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "User":
        """Create from a {"user": {...}} payload."""
        return cls.from_dict(data["user"])


@dataclass
class UserChanges(ChangeSet):
    """Profile fields to update; unset fields are left untouched."""

    fullname: Any = UNSET
    description: Any = UNSET
    gender: Any = UNSET
    birthday: Any = UNSET
    show_age: Any = UNSET
    location: Any = UNSET
    location_latitude: Any = UNSET
    location_longitude: Any = UNSET
    content_languages: Any = UNSET
    username: Any = UNSET
    contact_email: Any = UNSET


# =============================================================================
# Show Types
# =============================================================================


@dataclass
class Category:
    """A show category as embedded in a show."""

    category_id: int
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        """Create from API response dict."""
        return cls(category_id=int(data["category_id"]), name=data.get("name") or "")


@dataclass
class Show:
    """A podcast show."""

    show_id: int
    title: str = ""
    description: str = ""
    site_url: str = ""
    image_url: str = ""
    image_original_url: str = ""
    author_id: int = 0
    author: User | None = None
    category_id: int = 0
    category: Category | None = None
    language: str = ""
    episodes_count: int = 0
    followers_count: int = 0
    plays_count: int = 0
    likes_count: int = 0
    explicit: bool = False
    last_episode_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Show":
        """Create from API response dict."""
        author = data.get("author")
        category = data.get("category")
        return cls(
            show_id=int(data["show_id"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            site_url=data.get("site_url") or "",
            image_url=data.get("image_url") or "",
            image_original_url=data.get("image_original_url") or "",
            author_id=data.get("author_id") or 0,
            author=User.from_dict(author) if author else None,
            category_id=data.get("category_id") or 0,
            category=Category.from_dict(category) if category else None,
            language=data.get("language") or "",
            episodes_count=data.get("episodes_count") or 0,
            followers_count=data.get("followers_count") or 0,
            plays_count=data.get("plays_count") or 0,
            likes_count=data.get("likes_count") or 0,
            explicit=bool(data.get("explicit", False)),
            last_episode_at=parse_timestamp(data.get("last_episode_at")),
            created_at=parse_timestamp(data.get("created_at")),
        )

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "Show":
        """Create from a {"show": {...}} payload."""
        return cls.from_dict(data["show"])


@dataclass
class ShowChanges(ChangeSet):
    """Show fields to update; unset fields are left untouched."""

    title: Any = UNSET
    description: Any = UNSET
    category_id: Any = UNSET
    language: Any = UNSET
    explicit: Any = UNSET


@dataclass
class ExploreShow:
    """A show item returned by explore endpoints."""

    show_id: int
    title: str = ""
    site_url: str = ""
    image_url: str = ""
    image_original_url: str = ""
    author_id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExploreShow":
        """Create from API response dict."""
        return cls(
            show_id=int(data["show_id"]),
            title=data.get("title") or "",
            site_url=data.get("site_url") or "",
            image_url=data.get("image_url") or "",
            image_original_url=data.get("image_original_url") or "",
            author_id=data.get("author_id") or 0,
        )


# =============================================================================
# Episode Types
# =============================================================================


@dataclass
class Episode:
    """A podcast episode."""

    episode_id: int
    title: str = ""
    description: str = ""
    show_id: int = 0
    show: Show | None = None
    author_id: int = 0
    author: User | None = None
    site_url: str = ""
    image_url: str = ""
    image_original_url: str = ""
    duration: int = 0
    plays_count: int = 0
    likes_count: int = 0
    messages_count: int = 0
    download_enabled: bool = False
    explicit: bool = False
    hidden: bool = False
    tags: list[str] = field(default_factory=list)
    published_at: datetime | None = None
    encoding_status: str = ""
    media_url: str | None = None
    download_url: str | None = None

    @property
    def duration_formatted(self) -> str:
        """Duration (stored in milliseconds) as H:MM:SS or M:SS."""
        total_seconds = self.duration // 1000
        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes}:{seconds:02d}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Episode":
        """Create from API response dict."""
        show = data.get("show")
        author = data.get("author")
        return cls(
            episode_id=int(data["episode_id"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            show_id=data.get("show_id") or 0,
            show=Show.from_dict(show) if show else None,
            author_id=data.get("author_id") or 0,
            author=User.from_dict(author) if author else None,
            site_url=data.get("site_url") or "",
            image_url=data.get("image_url") or "",
            image_original_url=data.get("image_original_url") or "",
            duration=data.get("duration") or 0,
            plays_count=data.get("plays_count") or 0,
            likes_count=data.get("likes_count") or 0,
            messages_count=data.get("messages_count") or 0,
            download_enabled=bool(data.get("download_enabled", False)),
            explicit=bool(data.get("explicit", False)),
            hidden=bool(data.get("hidden", False)),
            tags=list(data.get("tags") or []),
            published_at=parse_timestamp(data.get("published_at")),
            encoding_status=data.get("encoding_status") or "",
            media_url=data.get("media_url"),
            download_url=data.get("download_url"),
        )

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "Episode":
        """Create from an {"episode": {...}} payload."""
        return cls.from_dict(data["episode"])


@dataclass
class EpisodeChanges(ChangeSet):
    """Episode fields to update; unset fields are left untouched."""

    title: Any = UNSET
    description: Any = UNSET
    tags: Any = UNSET
    explicit: Any = UNSET
    download_enabled: Any = UNSET
    hidden: Any = UNSET
    show_id: Any = UNSET
    # Empty string unschedules
    auto_published_at: Any = UNSET


# =============================================================================
# Chapter / Cuepoint / Message Types
# =============================================================================


@dataclass
class Chapter:
    """A chapter marker within an episode."""

    chapter_id: int
    starts_at: int = 0
    title: str = ""
    external_url: str | None = None
    image_url: str | None = None
    image_original_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chapter":
        """Create from API response dict."""
        return cls(
            chapter_id=int(data["chapter_id"]),
            starts_at=data.get("starts_at") or 0,
            title=data.get("title") or "",
            external_url=data.get("external_url"),
            image_url=data.get("image_url"),
            image_original_url=data.get("image_original_url"),
        )

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "Chapter":
        return cls.from_dict(data["chapter"])


@dataclass
class Cuepoint:
    """An ad insertion point (timecode in milliseconds)."""

    timecode: int
    ads_max_count: int = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cuepoint":
        """Create from API response dict."""
        return cls(timecode=int(data["timecode"]), ads_max_count=int(data.get("ads_max_count", 1)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {"timecode": self.timecode, "ads_max_count": self.ads_max_count}


@dataclass
class Message:
    """A listener message left on an episode."""

    message_id: int
    episode_id: int = 0
    text: str = ""
    created_at: str = ""
    author_id: int = 0
    author_username: str = ""
    author_fullname: str = ""
    author_site_url: str = ""
    author_image_url: str | None = None
    author_image_original_url: str | None = None
    author_is_owner: bool = False
    app_name: str | None = None
    app_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        """Create from API response dict."""
        return cls(
            message_id=int(data["message_id"]),
            episode_id=data.get("episode_id") or 0,
            text=data.get("text") or "",
            created_at=data.get("created_at") or "",
            author_id=data.get("author_id") or 0,
            author_username=data.get("author_username") or "",
            author_fullname=data.get("author_fullname") or "",
            author_site_url=data.get("author_site_url") or "",
            author_image_url=data.get("author_image_url"),
            author_image_original_url=data.get("author_image_original_url"),
            author_is_owner=bool(data.get("author_is_owner", False)),
            app_name=data.get("app_name"),
            app_url=data.get("app_url"),
        )


# =============================================================================
# Miscellaneous Types
# =============================================================================


@dataclass
class ShowCategory:
    """An entry of the show category list (level 1 = top-level)."""

    category_id: int
    name: str = ""
    permalink: str | None = None
    level: int = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowCategory":
        """Create from API response dict."""
        return cls(
            category_id=int(data["category_id"]),
            name=data.get("name") or "",
            permalink=data.get("permalink"),
            level=data.get("level") or 1,
        )


@dataclass
class GooglePlayCategory:
    """A Google Play podcast category."""

    category_id: int
    name: str = ""
    level: int = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GooglePlayCategory":
        """Create from API response dict."""
        return cls(
            category_id=int(data["category_id"]),
            name=data.get("name") or "",
            level=data.get("level") or 1,
        )


@dataclass
class Language:
    code: str
    name: str

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> list["Language"]:
        """Create a list sorted by code from a {"languages": {code: name}} payload."""
        return [cls(code=code, name=name) for code, name in sorted(data["languages"].items())]


# =============================================================================
# Statistics Types
# =============================================================================


@dataclass
class StatisticsParams:
    """Date range and grouping for statistics queries (dates as YYYY-MM-DD)."""

    from_date: str | None = None
    to_date: str | None = None
    group: str | None = None
    precision: int = 0

    def to_dict(self) -> dict[str, str]:
        params = {}
        if self.from_date:
            params["from"] = self.from_date
        if self.to_date:
            params["to"] = self.to_date
        if self.group:
            params["group"] = self.group
        if self.precision > 0:
            params["precision"] = str(self.precision)
        return params


@dataclass
class UserOverallStatistics:
    plays_count: int = 0
    plays_ondemand_count: int = 0
    plays_live_count: int = 0
    shows_count: int = 0
    episodes_count: int = 0
    likes_count: int = 0
    downloads_count: int = 0
    followers_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserOverallStatistics":
        """Create from a {"statistics": {...}} payload."""
        stats = data["statistics"]
        return cls(**{f.name: stats.get(f.name) or 0 for f in fields(cls)})


@dataclass
class ShowOverallStatistics:
    title: str = ""
    plays_count: int = 0
    plays_ondemand_count: int = 0
    plays_live_count: int = 0
    episodes_count: int = 0
    downloads_count: int = 0
    likes_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShowOverallStatistics":
        """Create from a {"statistics": {...}} payload."""
        stats = data["statistics"]
        values = {f.name: stats.get(f.name) or 0 for f in fields(cls) if f.name != "title"}
        return cls(title=stats.get("title") or "", **values)


@dataclass
class EpisodeOverallStatistics:
    plays_count: int = 0
    plays_ondemand_count: int = 0
    plays_live_count: int = 0
    chapters_count: int = 0
    messages_count: int = 0
    likes_count: int = 0
    downloads_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EpisodeOverallStatistics":
        """Create from a {"statistics": {...}} payload."""
        stats = data["statistics"]
        return cls(**{f.name: stats.get(f.name) or 0 for f in fields(cls)})


@dataclass
class PlayStatistics:
    date: str
    plays_count: int = 0
    plays_live_count: int = 0
    plays_ondemand_count: int = 0
    downloads_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayStatistics":
        """Create from API response dict."""
        return cls(
            date=data["date"],
            plays_count=data.get("plays_count") or 0,
            plays_live_count=data.get("plays_live_count") or 0,
            plays_ondemand_count=data.get("plays_ondemand_count") or 0,
            downloads_count=data.get("downloads_count") or 0,
        )


@dataclass
class PlayTotals:
    """Per-show or per-episode play totals; id is show_id or episode_id."""

    id: int
    title: str = ""
    is_deleted: bool = False
    is_transferred: bool = False
    plays_count: int = 0
    plays_live_count: int = 0
    plays_ondemand_count: int = 0
    downloads_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayTotals":
        """Create from API response dict."""
        item_id = data["show_id"] if "show_id" in data else data["episode_id"]
        return cls(
            id=int(item_id),
            title=data.get("title") or "",
            is_deleted=bool(data.get("is_deleted", False)),
            is_transferred=bool(data.get("is_transferred", False)),
            plays_count=data.get("plays_count") or 0,
            plays_live_count=data.get("plays_live_count") or 0,
            plays_ondemand_count=data.get("plays_ondemand_count") or 0,
            downloads_count=data.get("downloads_count") or 0,
        )


@dataclass
class DatedCount:
    """One point of a daily time series (likes, followers, listeners)."""

    date: str
    count: int = 0

    @classmethod
    def parser(cls, key: str):
        """Build a parser reading the count from `key` (e.g. likes_count)."""

        def parse(data: dict[str, Any]) -> "DatedCount":
            return cls(date=data["date"], count=data.get(key) or 0)

        return parse


@dataclass
class Share:
    """A named percentage (device, OS, country, city)."""

    name: str
    percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Share":
        """Create from API response dict."""
        return cls(name=data["name"], percentage=float(data.get("percentage") or 0))


@dataclass
class SourceOverall:
    name: str
    plays_count: int = 0
    percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceOverall":
        """Create from API response dict."""
        return cls(
            name=data["name"],
            plays_count=data.get("plays_count") or 0,
            percentage=float(data.get("percentage") or 0),
        )


@dataclass
class SourcesStatistics:
    overall: list[SourceOverall] = field(default_factory=list)
    details: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourcesStatistics":
        """Create from a {"statistics": {...}} payload."""
        stats = data["statistics"]
        return cls(
            overall=[SourceOverall.from_dict(s) for s in stats.get("overall") or []],
            details=list(stats.get("details") or []),
        )


@dataclass
class Breakdown:
    """Two named share lists, e.g. desktop/mobile OS or country/city."""

    groups: dict[str, list[Share]] = field(default_factory=dict)

    @classmethod
    def parser(cls, *keys: str):
        """Build a parser for a {"statistics": {key: [...], ...}} payload."""

        def parse(data: dict[str, Any]) -> "Breakdown":
            stats = data["statistics"]
            return cls(groups={key: [Share.from_dict(s) for s in stats.get(key) or []] for key in keys})

        return parse


def list_parser(key: str, item_parser):
    """Build a parser for a {key: [...]} payload, e.g. {"statistics": [...]}."""

    def parse(data: dict[str, Any]) -> list:
        return [item_parser(item) for item in data[key]]

    return parse

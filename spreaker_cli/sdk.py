"""
Spreaker SDK - High-level client with nice ergonomics.

This layer provides a clean, typed interface for the Spreaker API endpoints.
Built on top of the core APIClient.
"""

import builtins
import json
import logging
import urllib.parse
from pathlib import Path
from typing import Any

from spreaker_cli.core.client import APIClient, ClientConfig
from spreaker_cli.core.errors import APIError, ValidationError
from spreaker_cli.core.types import (
    Breakdown,
    Chapter,
    Cuepoint,
    DatedCount,
    Episode,
    EpisodeChanges,
    EpisodeOverallStatistics,
    ExploreShow,
    GooglePlayCategory,
    Language,
    Message,
    Page,
    PaginationParams,
    PlayStatistics,
    PlayTotals,
    Share,
    Show,
    ShowCategory,
    ShowChanges,
    ShowOverallStatistics,
    SourcesStatistics,
    StatisticsParams,
    User,
    UserChanges,
    UserOverallStatistics,
    form_value,
    list_parser,
)

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4000


def _require(value: Any, name: str) -> None:
    if value is None or value == "" or value == 0:
        raise ValidationError(f"{name} is required")


class SpreakerClient:
    """
    High-level Spreaker API client with typed methods.

    Example:
        client = SpreakerClient(ClientConfig(bearer_token="..."))

        me = client.users.me()
        page = client.shows.episodes(show_id, PaginationParams(limit=20))
        for episode in page.items:
            print(episode.title)

    """

    def __init__(self, config: ClientConfig | None = None):
        """
        Initialize the Spreaker client.

        Args:
            config: Connection settings (token, base URL, timeout)

        """
        self._client = APIClient(config)

        # Sub-clients for different domains
        self.users = UserOperations(self._client)
        self.shows = ShowOperations(self._client)
        self.episodes = EpisodeOperations(self._client)
        self.chapters = ChapterOperations(self._client)
        self.cuepoints = CuepointOperations(self._client)
        self.messages = MessageOperations(self._client)
        self.statistics = StatisticsOperations(self._client, self.users)
        self.search = SearchOperations(self._client)
        self.explore = ExploreOperations(self._client)
        self.tags = TagOperations(self._client)
        self.misc = MiscOperations(self._client)

    @property
    def api(self) -> APIClient:
        """The underlying core client."""
        return self._client


def _page_params(pagination: PaginationParams | None) -> dict[str, str]:
    return (pagination or PaginationParams()).to_dict()


# =============================================================================
# User Operations
# =============================================================================


class UserOperations:
    """Operations on user profiles and the social graph."""

    def __init__(self, client: APIClient):
        self._client = client

    def me(self) -> User:
        """Get the authenticated user's profile."""
        return self._client.get("/me", parser=User.from_response, auth=True)

    def get(self, user_id: int) -> User:
        """Get a user's public profile."""
        return self._client.get(f"/users/{user_id}", parser=User.from_response)

    def update(self, user_id: int, changes: UserChanges) -> User:
        """
        Update a user's profile.

        Args:
            user_id: The user ID (must be the authenticated user)
            changes: Fields to change; unset fields are not sent

        """
        if changes.is_empty():
            raise ValidationError("no fields to update")
        return self._client.post_form(f"/users/{user_id}", changes.to_fields(), parser=User.from_response)

    def shows(self, user_id: int, pagination: PaginationParams | None = None) -> Page[Show]:
        """List shows belonging to a user."""
        return self._client.get_page(f"/users/{user_id}/shows", _page_params(pagination), Show.from_dict)

    def my_shows(self, pagination: PaginationParams | None = None) -> Page[Show]:
        """List the authenticated user's shows."""
        return self.shows(self.me().user_id, pagination)

    def followers(self, user_id: int, pagination: PaginationParams | None = None) -> Page[User]:
        """List a user's followers."""
        return self._client.get_page(f"/users/{user_id}/followers", _page_params(pagination), User.from_dict)

    def followings(self, user_id: int, pagination: PaginationParams | None = None) -> Page[User]:
        """List the users a user follows."""
        return self._client.get_page(f"/users/{user_id}/followings", _page_params(pagination), User.from_dict)

    def follow(self, user_id: int, following_id: int) -> bool:
        """Make user_id (the authenticated user) follow following_id."""
        self._client.put(f"/users/{user_id}/followings/{following_id}")
        return True

    def unfollow(self, user_id: int, following_id: int) -> bool:
        """Stop user_id following following_id."""
        self._client.delete(f"/users/{user_id}/followings/{following_id}")
        return True

    def blocks(self, user_id: int, pagination: PaginationParams | None = None) -> Page[User]:
        """List users blocked by user_id."""
        return self._client.get_page(
            f"/users/{user_id}/blocks",
            _page_params(pagination),
            User.from_dict,
            auth=True,
        )

    def block(self, user_id: int, blocked_id: int) -> bool:
        self._client.put(f"/users/{user_id}/blocks/{blocked_id}")
        return True

    def unblock(self, user_id: int, blocked_id: int) -> bool:
        self._client.delete(f"/users/{user_id}/blocks/{blocked_id}")
        return True


# =============================================================================
# Show Operations
# =============================================================================


class ShowOperations:
    """Operations for managing shows."""

    def __init__(self, client: APIClient):
        self._client = client

    def get(self, show_id: int) -> Show:
        """Get a show by ID."""
        return self._client.get(f"/shows/{show_id}", parser=Show.from_response)

    def create(
        self,
        title: str,
        description: str | None = None,
        category_id: int | None = None,
        language: str | None = None,
        explicit: bool = False,
    ) -> Show:
        """
        Create a new show.

        Args:
            title: Show title
            description: Optional description
            category_id: Optional category (see misc.show_categories)
            language: Optional language code (e.g. en, it)
            explicit: Mark as explicit content

        Returns:
            Created Show

        """
        _require(title, "title")
        fields = {"title": title}
        if description:
            fields["description"] = description
        if category_id:
            fields["category_id"] = str(category_id)
        if language:
            fields["language"] = language
        if explicit:
            fields["explicit"] = "true"
        return self._client.post_form("/shows", fields, parser=Show.from_response)

    def update(self, show_id: int, changes: ShowChanges) -> Show:
        """Update a show; only explicitly set fields are sent."""
        if changes.is_empty():
            raise ValidationError("no fields to update")
        return self._client.post_form(f"/shows/{show_id}", changes.to_fields(), parser=Show.from_response)

    def delete(self, show_id: int) -> bool:
        """Delete a show."""
        self._client.delete(f"/shows/{show_id}")
        return True

    def episodes(self, show_id: int, pagination: PaginationParams | None = None) -> Page[Episode]:
        """List a show's episodes."""
        return self._client.get_page(f"/shows/{show_id}/episodes", _page_params(pagination), Episode.from_dict)

    def all_episodes(self, show_id: int, max_items: int | None = None) -> builtins.list[Episode]:
        """Fetch every episode of a show, following next_url."""
        return self._client.paginate_all(f"/shows/{show_id}/episodes", parser=Episode.from_dict, max_items=max_items)

    def favorites(self, user_id: int, pagination: PaginationParams | None = None) -> Page[Show]:
        """List a user's favorite shows."""
        return self._client.get_page(f"/users/{user_id}/favorites", _page_params(pagination), Show.from_dict)

    def add_favorite(self, user_id: int, show_id: int) -> bool:
        self._client.put(f"/users/{user_id}/favorites/{show_id}")
        return True

    def remove_favorite(self, user_id: int, show_id: int) -> bool:
        self._client.delete(f"/users/{user_id}/favorites/{show_id}")
        return True


# =============================================================================
# Episode Operations
# =============================================================================


class EpisodeOperations:
    """Operations for managing episodes."""

    def __init__(self, client: APIClient):
        self._client = client

    def get(self, episode_id: int) -> Episode:
        """Get an episode by ID."""
        return self._client.get(f"/episodes/{episode_id}", parser=Episode.from_response)

    def upload(
        self,
        show_id: int,
        title: str,
        media_file: str | Path,
        description: str | None = None,
        tags: builtins.list[str] | None = None,
        explicit: bool = False,
        download_enabled: bool = False,
        hidden: bool = False,
        auto_published_at: str | None = None,
    ) -> Episode:
        """
        Upload a new episode with its audio file.

        Args:
            show_id: Target show
            title: Episode title
            media_file: Path to the audio file
            description: Show notes
            tags: Tags for the episode
            explicit: Contains explicit content
            download_enabled: Allow downloads
            hidden: Private episode
            auto_published_at: Schedule publishing ("2020-04-20 18:00:00")

        Returns:
            Created Episode

        """
        _require(title, "title")
        _require(media_file, "media_file")
        fields = self._create_fields(title, description, tags, explicit, download_enabled, hidden)
        if auto_published_at:
            fields["auto_published_at"] = auto_published_at
        return self._client.post_form_with_file(
            f"/shows/{show_id}/episodes",
            fields,
            "media_file",
            media_file,
            parser=Episode.from_response,
        )

    def create_draft(
        self,
        show_id: int,
        title: str,
        description: str | None = None,
        tags: builtins.list[str] | None = None,
        explicit: bool = False,
        download_enabled: bool = False,
        hidden: bool = False,
    ) -> Episode:
        """Create a draft episode without audio; upload media later with update."""
        _require(title, "title")
        _require(show_id, "show_id")
        fields = self._create_fields(title, description, tags, explicit, download_enabled, hidden)
        fields["show_id"] = str(show_id)
        return self._client.post_form("/episodes/drafts", fields, parser=Episode.from_response)

    @staticmethod
    def _create_fields(
        title: str,
        description: str | None,
        tags: builtins.list[str] | None,
        explicit: bool,
        download_enabled: bool,
        hidden: bool,
    ) -> dict[str, str]:
        fields = {"title": title}
        if description:
            fields["description"] = description
        if tags:
            fields["tags"] = form_value(tags)
        if explicit:
            fields["explicit"] = "true"
        if download_enabled:
            fields["download_enabled"] = "true"
        if hidden:
            fields["hidden"] = "true"
        return fields

    def update(self, episode_id: int, changes: EpisodeChanges) -> Episode:
        """Update an episode; only explicitly set fields are sent."""
        if changes.is_empty():
            raise ValidationError("no fields to update")
        return self._client.post_form(f"/episodes/{episode_id}", changes.to_fields(), parser=Episode.from_response)

    def delete(self, episode_id: int) -> bool:
        """Delete an episode."""
        self._client.delete(f"/episodes/{episode_id}")
        return True

    def like(self, user_id: int, episode_id: int) -> bool:
        self._client.put(f"/users/{user_id}/likes/{episode_id}")
        return True

    def unlike(self, user_id: int, episode_id: int) -> bool:
        self._client.delete(f"/users/{user_id}/likes/{episode_id}")
        return True

    def is_liked(self, user_id: int, episode_id: int) -> bool:
        """Check whether a user likes an episode (a 404 means no)."""
        try:
            self._client.get(f"/users/{user_id}/likes/{episode_id}")
        except APIError as e:
            if e.is_not_found():
                return False
            raise
        return True

    def likes(self, episode_id: int, pagination: PaginationParams | None = None) -> Page[User]:
        """List users who liked an episode."""
        return self._client.get_page(f"/episodes/{episode_id}/likes", _page_params(pagination), User.from_dict)

    def liked(self, user_id: int, pagination: PaginationParams | None = None) -> Page[Episode]:
        """List episodes a user liked."""
        return self._client.get_page(f"/users/{user_id}/likes", _page_params(pagination), Episode.from_dict)

    def bookmark(self, user_id: int, episode_id: int) -> bool:
        """Bookmark an episode (user_id must own the token)."""
        self._client.put(f"/users/{user_id}/bookmarks/{episode_id}")
        return True

    def unbookmark(self, user_id: int, episode_id: int) -> bool:
        self._client.delete(f"/users/{user_id}/bookmarks/{episode_id}")
        return True

    def user_episodes(self, user_id: int, pagination: PaginationParams | None = None) -> Page[Episode]:
        """List episodes published by a user."""
        return self._client.get_page(f"/users/{user_id}/episodes", _page_params(pagination), Episode.from_dict)

    def play_url(self, episode_id: int) -> str:
        """Get the streaming URL for an episode."""
        result = self._client.get(f"/episodes/{episode_id}/play")
        if not isinstance(result, dict) or not result.get("url"):
            raise ValidationError("play response did not include a url", details={"payload": result})
        return result["url"]

    def download_url(self, episode_id: int) -> str:
        """Resolve the direct download URL without following the redirect."""
        return self._client.resolve_redirect(f"/episodes/{episode_id}/download")

    def download(self, episode_id: int, destination: str | Path) -> int:
        """
        Download an episode's audio to a local file.

        Returns:
            Number of bytes written

        """
        url = self.download_url(episode_id)
        logger.info("downloading episode %s from %s", episode_id, url)
        return self._client.download(url, destination)


# =============================================================================
# Chapter Operations
# =============================================================================


class ChapterOperations:
    """Operations for episode chapters."""

    def __init__(self, client: APIClient):
        self._client = client

    def list(self, episode_id: int, pagination: PaginationParams | None = None) -> Page[Chapter]:
        """List an episode's chapters."""
        return self._client.get_page(f"/episodes/{episode_id}/chapters", _page_params(pagination), Chapter.from_dict)

    @staticmethod
    def _body(
        starts_at: int | None,
        title: str | None,
        external_url: str | None,
        image_file: str | None,
        image_crop: str | None,
    ) -> dict[str, str]:
        body = {}
        if starts_at is not None:
            body["starts_at"] = str(starts_at)
        if title:
            body["title"] = title
        if external_url:
            body["external_url"] = external_url
        if image_file:
            body["image_file"] = image_file
        if image_crop:
            body["image_crop"] = image_crop
        return body

    def add(
        self,
        episode_id: int,
        starts_at: int,
        title: str,
        external_url: str | None = None,
        image_file: str | None = None,
        image_crop: str | None = None,
    ) -> Chapter:
        """
        Add a chapter to an episode.

        Args:
            episode_id: The episode ID
            starts_at: Offset in milliseconds
            title: Chapter title
            external_url: Optional link
            image_file: Optional image URL
            image_crop: Optional crop ("x1,y1,x2,y2")

        """
        if starts_at is None:
            raise ValidationError("starts_at is required")
        _require(title, "title")
        return self._client.post_json(
            f"/episodes/{episode_id}/chapters",
            self._body(starts_at, title, external_url, image_file, image_crop),
            parser=Chapter.from_response,
        )

    def update(
        self,
        episode_id: int,
        chapter_id: int,
        starts_at: int | None = None,
        title: str | None = None,
        external_url: str | None = None,
        image_file: str | None = None,
        image_crop: str | None = None,
    ) -> Chapter:
        """Update a chapter."""
        body = self._body(starts_at, title, external_url, image_file, image_crop)
        if not body:
            raise ValidationError("no fields to update")
        return self._client.post_json(
            f"/episodes/{episode_id}/chapters/{chapter_id}",
            body,
            parser=Chapter.from_response,
        )

    def delete(self, episode_id: int, chapter_id: int) -> bool:
        self._client.delete(f"/episodes/{episode_id}/chapters/{chapter_id}")
        return True

    def delete_all(self, episode_id: int) -> bool:
        self._client.delete(f"/episodes/{episode_id}/chapters")
        return True


# =============================================================================
# Cuepoint Operations
# =============================================================================


class CuepointOperations:
    """Operations for episode ad cuepoints."""

    def __init__(self, client: APIClient):
        self._client = client

    def list(self, episode_id: int) -> builtins.list[Cuepoint]:
        """List an episode's cuepoints."""
        return self._client.get(
            f"/episodes/{episode_id}/cuepoints",
            parser=list_parser("cuepoints", Cuepoint.from_dict),
            auth=True,
        )

    def update(self, episode_id: int, cuepoints: builtins.list[Cuepoint]) -> bool:
        """Replace all cuepoints of an episode."""
        encoded = json.dumps([c.to_dict() for c in cuepoints])
        self._client.post_json(f"/episodes/{episode_id}/cuepoints", {"cuepoints": encoded})
        return True

    def delete(self, episode_id: int) -> bool:
        """Delete all cuepoints of an episode."""
        self._client.delete(f"/episodes/{episode_id}/cuepoints")
        return True


# =============================================================================
# Message Operations
# =============================================================================


class MessageOperations:
    """Operations for episode messages."""

    def __init__(self, client: APIClient):
        self._client = client

    def list(self, episode_id: int, pagination: PaginationParams | None = None) -> Page[Message]:
        """List messages left on an episode."""
        return self._client.get_page(f"/episodes/{episode_id}/messages", _page_params(pagination), Message.from_dict)

    def create(self, episode_id: int, text: str) -> bool:
        """Leave a message on an episode (1 to 4000 characters)."""
        _require(text, "text")
        if len(text) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"text exceeds maximum length of {MAX_MESSAGE_LENGTH} characters")
        self._client.post_json(f"/episodes/{episode_id}/messages", {"text": text})
        return True

    def delete(self, episode_id: int, message_id: int) -> bool:
        """Delete a message (author or episode owner only)."""
        self._client.delete(f"/episodes/{episode_id}/messages/{message_id}")
        return True

    def report_abuse(self, episode_id: int, message_id: int) -> bool:
        """Report a message as spam or abusive."""
        self._client.post_json(f"/episodes/{episode_id}/messages/{message_id}/report-abuse")
        return True


# =============================================================================
# Statistics Operations
# =============================================================================


# Resource kinds and which statistics each one exposes
STATISTICS_KINDS = {
    "users": {"plays", "likes", "followers", "sources", "devices", "os", "geographics"},
    "shows": {"plays", "likes", "sources", "devices", "os", "geographics", "listeners"},
    "episodes": {"plays", "likes", "sources", "devices", "os"},
}


class StatisticsOperations:
    """Statistics for users, shows and episodes. All require authentication."""

    def __init__(self, client: APIClient, users: UserOperations):
        self._client = client
        self._users = users

    def _get(self, kind: str, resource_id: int, metric: str, params: StatisticsParams | None, parser):
        if metric not in STATISTICS_KINDS[kind]:
            raise ValidationError(f"{metric} statistics are not available for {kind}")
        query = (params or StatisticsParams()).to_dict()
        return self._client.get(f"/{kind}/{resource_id}/statistics/{metric}", query, parser=parser, auth=True)

    def user(self, user_id: int) -> UserOverallStatistics:
        return self._client.get(f"/users/{user_id}/statistics", parser=UserOverallStatistics.from_dict, auth=True)

    def me(self) -> UserOverallStatistics:
        """Overall statistics of the authenticated user."""
        return self.user(self._users.me().user_id)

    def show(self, show_id: int) -> ShowOverallStatistics:
        return self._client.get(f"/shows/{show_id}/statistics", parser=ShowOverallStatistics.from_dict, auth=True)

    def episode(self, episode_id: int) -> EpisodeOverallStatistics:
        return self._client.get(
            f"/episodes/{episode_id}/statistics",
            parser=EpisodeOverallStatistics.from_dict,
            auth=True,
        )

    def plays(
        self,
        kind: str,
        resource_id: int,
        params: StatisticsParams | None = None,
    ) -> builtins.list[PlayStatistics]:
        """Daily plays for a user, show or episode."""
        return self._get(kind, resource_id, "plays", params, list_parser("statistics", PlayStatistics.from_dict))

    def likes(self, kind: str, resource_id: int, params: StatisticsParams | None = None) -> builtins.list[DatedCount]:
        return self._get(kind, resource_id, "likes", params, list_parser("statistics", DatedCount.parser("likes_count")))

    def followers(self, user_id: int, params: StatisticsParams | None = None) -> builtins.list[DatedCount]:
        return self._get("users", user_id, "followers", params, list_parser("statistics", DatedCount.parser("followers_count")))

    def listeners(self, show_id: int, params: StatisticsParams | None = None) -> builtins.list[DatedCount]:
        return self._get("shows", show_id, "listeners", params, list_parser("statistics", DatedCount.parser("listeners_count")))

    def sources(self, kind: str, resource_id: int, params: StatisticsParams | None = None) -> SourcesStatistics:
        return self._get(kind, resource_id, "sources", params, SourcesStatistics.from_dict)

    def devices(self, kind: str, resource_id: int, params: StatisticsParams | None = None) -> builtins.list[Share]:
        return self._get(kind, resource_id, "devices", params, list_parser("statistics", Share.from_dict))

    def os(self, kind: str, resource_id: int, params: StatisticsParams | None = None) -> Breakdown:
        """Operating system shares, split into desktop and mobile."""
        return self._get(kind, resource_id, "os", params, Breakdown.parser("desktop", "mobile"))

    def geographics(self, kind: str, resource_id: int, params: StatisticsParams | None = None) -> Breakdown:
        """Country and city shares."""
        return self._get(kind, resource_id, "geographics", params, Breakdown.parser("country", "city"))

    def show_play_totals(
        self,
        user_id: int,
        params: StatisticsParams | None = None,
        pagination: PaginationParams | None = None,
    ) -> Page[PlayTotals]:
        """Play totals for each show of a user."""
        query = {**(params or StatisticsParams()).to_dict(), **_page_params(pagination)}
        return self._client.get_page(
            f"/users/{user_id}/shows/statistics/plays/totals",
            query,
            PlayTotals.from_dict,
            auth=True,
        )

    def episode_play_totals(
        self,
        show_id: int,
        params: StatisticsParams | None = None,
        pagination: PaginationParams | None = None,
    ) -> Page[PlayTotals]:
        """Play totals for each episode of a show."""
        query = {**(params or StatisticsParams()).to_dict(), **_page_params(pagination)}
        return self._client.get_page(
            f"/shows/{show_id}/episodes/statistics/plays/totals",
            query,
            PlayTotals.from_dict,
            auth=True,
        )


# =============================================================================
# Search / Explore / Tags
# =============================================================================


class SearchOperations:
    """Full-text search over shows and episodes."""

    FILTERS = ("listenable", "editable")

    def __init__(self, client: APIClient):
        self._client = client

    def _search(
        self,
        path: str,
        result_type: str,
        query: str,
        search_filter: str | None,
        pagination: PaginationParams | None,
        parser,
    ) -> Page:
        _require(query, "query")
        if search_filter and search_filter not in self.FILTERS:
            raise ValidationError(f"filter must be one of: {', '.join(self.FILTERS)}")
        params = {"type": result_type, "q": query, "filter": search_filter, **_page_params(pagination)}
        return self._client.get_page(path, params, parser)

    def shows(
        self,
        query: str,
        user_id: int | None = None,
        search_filter: str | None = None,
        pagination: PaginationParams | None = None,
    ) -> Page[Show]:
        """Search shows, optionally only those of one user."""
        path = f"/search/users/{user_id}" if user_id else "/search"
        return self._search(path, "shows", query, search_filter, pagination, Show.from_dict)

    def episodes(
        self,
        query: str,
        user_id: int | None = None,
        show_id: int | None = None,
        search_filter: str | None = None,
        pagination: PaginationParams | None = None,
    ) -> Page[Episode]:
        """Search episodes, optionally within one user's or one show's catalog."""
        if user_id and show_id:
            raise ValidationError("use either user_id or show_id, not both")
        if show_id:
            path = f"/search/shows/{show_id}"
        elif user_id:
            path = f"/search/users/{user_id}"
        else:
            path = "/search"
        return self._search(path, "episodes", query, search_filter, pagination, Episode.from_dict)


class ExploreOperations:
    def __init__(self, client: APIClient):
        self._client = client

    def category_shows(self, category_id: int, pagination: PaginationParams | None = None) -> Page[ExploreShow]:
        """Shows in a category (see misc.show_categories for IDs)."""
        return self._client.get_page(
            f"/explore/categories/{category_id}/items",
            _page_params(pagination),
            ExploreShow.from_dict,
        )


class TagOperations:
    def __init__(self, client: APIClient):
        self._client = client

    def episodes(self, tag: str, pagination: PaginationParams | None = None) -> Page[Episode]:
        """Latest episodes with a tag (tag may contain spaces)."""
        _require(tag, "tag")
        encoded = urllib.parse.quote(tag, safe="")
        return self._client.get_page(f"/tags/{encoded}/episodes", _page_params(pagination), Episode.from_dict)


# =============================================================================
# Miscellaneous Operations
# =============================================================================


class MiscOperations:
    """Reference data: categories and languages."""

    def __init__(self, client: APIClient):
        self._client = client

    def show_categories(self, locale: str | None = None) -> builtins.list[ShowCategory]:
        """List show categories, names localized with e.g. it_IT."""
        return self._client.get(
            "/show-categories",
            {"c": locale},
            parser=list_parser("categories", ShowCategory.from_dict),
        )

    def googleplay_categories(self) -> builtins.list[GooglePlayCategory]:
        return self._client.get(
            "/googleplay-categories",
            parser=list_parser("googleplay_categories", GooglePlayCategory.from_dict),
        )

    def languages(self, locale: str | None = None) -> builtins.list[Language]:
        """List show languages sorted by code."""
        return self._client.get("/show-languages", {"c": locale}, parser=Language.from_response)

"""
Spreaker CLI - Opinionated command-line interface.

This layer provides the user-facing CLI commands, using the SDK layer
for all operations. It handles:
- Argument parsing
- Output mode selection (table for humans, json for pipes, plain for scripts)
- Pretty formatting for human output
- JSON output for piping/automation
"""

import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

from spreaker_cli import __version__
from spreaker_cli.config import OUTPUT_FORMATS, Config, load_config
from spreaker_cli.core.errors import CLIError, ValidationError
from spreaker_cli.core.types import (
    Cuepoint,
    EpisodeChanges,
    Page,
    PaginationParams,
    ShowChanges,
    StatisticsParams,
    UserChanges,
)
from spreaker_cli.sdk import STATISTICS_KINDS, SpreakerClient

logger = logging.getLogger(__name__)

# =============================================================================
# Output Helpers
# =============================================================================


HUMAN_LIMIT = 20  # Default limit for human-readable output

# (header, getter, width)
Column = tuple[str, Callable[[Any], Any], int]


def is_tty() -> bool:
    """Check if stdout is a TTY (human) or pipe (LLM/machine)."""
    return sys.stdout.isatty()


def output_mode(args: argparse.Namespace) -> str:
    """Resolve the output format: explicit setting, else table on a TTY, json when piped."""
    config: Config = args.config
    if config.output_format:
        return config.output_format
    return "table" if is_tty() else "json"


def to_jsonable(data: Any) -> Any:
    """Convert dataclasses (and lists of them) to plain JSON-ready values."""
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    if isinstance(data, dict):
        return {key: to_jsonable(value) for key, value in data.items()}
    if isinstance(data, list):
        return [to_jsonable(item) for item in data]
    return data


def json_output(data: Any, pretty: bool = False) -> None:
    """Print JSON output."""
    indent = 2 if pretty or is_tty() else None
    print(json.dumps(to_jsonable(data), indent=indent, default=str))


def error_output(error: CLIError) -> None:
    """Print error and exit."""
    print(json.dumps(error.to_dict(), default=str), file=sys.stderr)
    sys.exit(1)


def success_output(data: Any) -> None:
    """Print success output."""
    json_output(data)


def table_output(
    headers: list[str],
    rows: list[list[str]],
    widths: list[int],
) -> None:
    """Print a formatted table for human output."""
    # Header
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(header_line)
    print("-" * len(header_line))

    # Rows
    for row in rows:
        print("  ".join(str(v)[:w].ljust(w) for v, w in zip(row, widths)))


def detail_output(pairs: list[tuple[str, Any]]) -> None:
    """Print aligned "Label: value" lines, skipping empty values."""
    shown = [(label, value) for label, value in pairs if value not in (None, "")]
    width = max((len(label) for label, _ in shown), default=0) + 1
    for label, value in shown:
        print(f"{(label + ':').ljust(width)}  {value}")


def render_items(args: argparse.Namespace, items: list[Any], columns: list[Column], empty: str) -> None:
    """Render a list of items in the selected output mode."""
    mode = output_mode(args)
    if mode == "json":
        success_output({"data": items, "total_count": len(items)})
        return
    if mode == "plain":
        for item in items:
            print("\t".join(str(getter(item)) for _, getter, _ in columns[:2]))
        return
    if not items:
        print(empty)
        return
    table_output(
        [header for header, _, _ in columns],
        [["" if getter(item) is None else getter(item) for _, getter, _ in columns] for item in items],
        [width for _, _, width in columns],
    )


def render_page(args: argparse.Namespace, page: Page, columns: list[Column], empty: str) -> None:
    """Render one page of a list endpoint, with its continuation cursor."""
    mode = output_mode(args)
    if mode == "json":
        success_output({"data": page.items, "next_url": page.next_url or None, "has_more": page.has_more})
        return
    render_items(args, page.items, columns, empty)
    if mode == "table" and page.has_more:
        print(f"\nMore results available (next: {page.next_url})")


def render_item(args: argparse.Namespace, item: Any, pairs: list[tuple[str, Any]], plain: str) -> None:
    """Render a single resource."""
    mode = output_mode(args)
    if mode == "json":
        success_output(item)
    elif mode == "plain":
        print(plain)
    else:
        detail_output(pairs)


def done_output(args: argparse.Namespace, message: str, **extra: Any) -> None:
    """Report a successful side-effect-only command."""
    if output_mode(args) == "json":
        success_output({"success": True, "message": message, **extra})
    else:
        print(message)


def confirm_action(prompt: str) -> bool:
    """Ask the user for confirmation on stdin."""
    try:
        answer = input(f"{prompt} [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


USER_COLUMNS: list[Column] = [
    ("ID", lambda u: u.user_id, 10),
    ("Username", lambda u: u.username, 20),
    ("Name", lambda u: u.fullname, 30),
    ("Followers", lambda u: u.followers_count, 10),
]

SHOW_COLUMNS: list[Column] = [
    ("ID", lambda s: s.show_id, 10),
    ("Title", lambda s: s.title, 40),
    ("Language", lambda s: s.language, 8),
    ("Episodes", lambda s: s.episodes_count, 8),
]

EPISODE_COLUMNS: list[Column] = [
    ("ID", lambda e: e.episode_id, 10),
    ("Title", lambda e: e.title, 40),
    ("Duration", lambda e: e.duration_formatted, 9),
    ("Plays", lambda e: e.plays_count, 8),
    ("Published", lambda e: e.published_at, 19),
]


# =============================================================================
# Argument Helpers
# =============================================================================


def pagination(args: argparse.Namespace) -> PaginationParams:
    """Build pagination params from --limit/--offset."""
    limit = args.limit if args.limit is not None else (HUMAN_LIMIT if output_mode(args) == "table" else 0)
    return PaginationParams(limit=limit, offset=args.offset or 0)


def stats_params(args: argparse.Namespace) -> StatisticsParams:
    return StatisticsParams(
        from_date=args.from_date,
        to_date=args.to_date,
        group=args.group,
        precision=args.precision or 0,
    )


def parse_bool(value: str) -> bool:
    """argparse type for explicit true/false flags."""
    lowered = value.lower()
    if lowered in ("true", "yes", "1", "on"):
        return True
    if lowered in ("false", "no", "0", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def parse_tags(value: str) -> list[str]:
    return [tag.strip() for tag in value.split(",") if tag.strip()]


def changes_from_args(cls, args: argparse.Namespace, names: Sequence[str]):
    """Build a change set from options the user actually passed."""
    values = {name: getattr(args, name) for name in names if getattr(args, name, None) is not None}
    changes = cls(**values)
    if changes.is_empty():
        raise ValidationError("nothing to update: pass at least one field option")
    return changes


def require_force_or_confirm(args: argparse.Namespace, prompt: str) -> bool:
    if args.force:
        return True
    if not sys.stdin.isatty():
        raise ValidationError("refusing to delete without confirmation; pass --force")
    return confirm_action(prompt)


# =============================================================================
# CLI Commands - Account
# =============================================================================


def cmd_login(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Check a token against /me."""
    try:
        user = client.users.me()
        done_output(
            args,
            f"Token is valid for {user.username} ({user.user_id}). Export it as SPREAKER_TOKEN to keep using it.",
            user_id=user.user_id,
            username=user.username,
        )
    except CLIError as e:
        error_output(e)


def cmd_me(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Show the authenticated user's profile."""
    try:
        user = client.users.me()
        render_item(args, user, _user_pairs(user), f"{user.user_id}\t{user.fullname}")
    except CLIError as e:
        error_output(e)


def cmd_config_show(_client: SpreakerClient, args: argparse.Namespace) -> None:
    """Show the effective configuration (token masked)."""
    config: Config = args.config
    if output_mode(args) == "table":
        detail_output(list(config.to_dict().items()))
    else:
        success_output(config.to_dict())


# =============================================================================
# CLI Commands - Users
# =============================================================================


def _user_pairs(user) -> list[tuple[str, Any]]:
    return [
        ("ID", user.user_id),
        ("Username", user.username),
        ("Name", user.fullname),
        ("Kind", user.kind),
        ("Plan", user.plan),
        ("Followers", user.followers_count),
        ("Following", user.followings_count),
        ("URL", user.site_url),
        ("Bio", truncate(user.description, 80)),
    ]


def cmd_users_get(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Get a user's public profile."""
    try:
        user = client.users.get(args.user_id)
        render_item(args, user, _user_pairs(user), f"{user.user_id}\t{user.fullname}")
    except CLIError as e:
        error_output(e)


def cmd_users_update(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Update the authenticated user's profile."""
    try:
        changes = changes_from_args(
            UserChanges,
            args,
            ["fullname", "description", "location", "username", "contact_email", "content_languages", "show_age"],
        )
        me = client.users.me()
        user = client.users.update(me.user_id, changes)
        render_item(args, user, _user_pairs(user), f"{user.user_id}\t{user.fullname}")
    except CLIError as e:
        error_output(e)


def cmd_users_followers(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        page = client.users.followers(args.user_id, pagination(args))
        render_page(args, page, USER_COLUMNS, "No followers found.")
    except CLIError as e:
        error_output(e)


def cmd_users_followings(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        page = client.users.followings(args.user_id, pagination(args))
        render_page(args, page, USER_COLUMNS, "Not following anyone.")
    except CLIError as e:
        error_output(e)


def cmd_users_follow(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        me = client.users.me()
        if args.unfollow:
            client.users.unfollow(me.user_id, args.user_id)
            done_output(args, f"Unfollowed user {args.user_id}")
        else:
            client.users.follow(me.user_id, args.user_id)
            done_output(args, f"Following user {args.user_id}")
    except CLIError as e:
        error_output(e)


def cmd_users_blocks(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        me = client.users.me()
        page = client.users.blocks(me.user_id, pagination(args))
        render_page(args, page, USER_COLUMNS, "No blocked users.")
    except CLIError as e:
        error_output(e)


def cmd_users_block(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        me = client.users.me()
        if args.unblock:
            client.users.unblock(me.user_id, args.user_id)
            done_output(args, f"Unblocked user {args.user_id}")
        else:
            client.users.block(me.user_id, args.user_id)
            done_output(args, f"Blocked user {args.user_id}")
    except CLIError as e:
        error_output(e)


# =============================================================================
# CLI Commands - Shows
# =============================================================================


def _show_pairs(show) -> list[tuple[str, Any]]:
    return [
        ("ID", show.show_id),
        ("Title", show.title),
        ("Language", show.language),
        ("Category", show.category.name if show.category else show.category_id or None),
        ("Episodes", show.episodes_count),
        ("Followers", show.followers_count),
        ("Plays", show.plays_count),
        ("Explicit", "yes" if show.explicit else "no"),
        ("Last episode", show.last_episode_at),
        ("URL", show.site_url),
        ("Description", truncate(show.description, 80)),
    ]


def cmd_shows_list(client: SpreakerClient, args: argparse.Namespace) -> None:
    """List the authenticated user's shows, or another user's with --user."""
    try:
        if args.user:
            page = client.users.shows(args.user, pagination(args))
        else:
            page = client.users.my_shows(pagination(args))
        render_page(args, page, SHOW_COLUMNS, "No shows found.")
    except CLIError as e:
        error_output(e)


def cmd_shows_get(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        show = client.shows.get(args.show_id)
        render_item(args, show, _show_pairs(show), f"{show.show_id}\t{show.title}")
    except CLIError as e:
        error_output(e)


def cmd_shows_create(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        show = client.shows.create(
            args.title,
            description=args.description,
            category_id=args.category_id,
            language=args.language,
            explicit=args.explicit,
        )
        render_item(args, show, _show_pairs(show), f"{show.show_id}\t{show.title}")
    except CLIError as e:
        error_output(e)


def cmd_shows_update(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        changes = changes_from_args(ShowChanges, args, ["title", "description", "category_id", "language", "explicit"])
        show = client.shows.update(args.show_id, changes)
        render_item(args, show, _show_pairs(show), f"{show.show_id}\t{show.title}")
    except CLIError as e:
        error_output(e)


def cmd_shows_delete(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        if not require_force_or_confirm(args, f"Delete show {args.show_id}? This cannot be undone."):
            print("Cancelled.")
            return
        client.shows.delete(args.show_id)
        done_output(args, f"Show {args.show_id} deleted")
    except CLIError as e:
        error_output(e)


def cmd_shows_favorites(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        user_id = args.user or client.users.me().user_id
        page = client.shows.favorites(user_id, pagination(args))
        render_page(args, page, SHOW_COLUMNS, "No favorite shows.")
    except CLIError as e:
        error_output(e)


def cmd_shows_favorite(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        me = client.users.me()
        if args.remove:
            client.shows.remove_favorite(me.user_id, args.show_id)
            done_output(args, f"Show {args.show_id} removed from favorites")
        else:
            client.shows.add_favorite(me.user_id, args.show_id)
            done_output(args, f"Show {args.show_id} added to favorites")
    except CLIError as e:
        error_output(e)


# =============================================================================
# CLI Commands - Episodes
# =============================================================================


def _episode_pairs(episode) -> list[tuple[str, Any]]:
    return [
        ("ID", episode.episode_id),
        ("Title", episode.title),
        ("Show ID", episode.show_id),
        ("Duration", episode.duration_formatted),
        ("Plays", episode.plays_count),
        ("Likes", episode.likes_count),
        ("Messages", episode.messages_count),
        ("Published", episode.published_at),
        ("Encoding", episode.encoding_status),
        ("Tags", ", ".join(episode.tags)),
        ("URL", episode.site_url),
        ("Description", truncate(episode.description, 80)),
    ]


def _show_id_or_default(args: argparse.Namespace) -> int:
    show_id = args.show_id or args.config.default_show_id
    if not show_id:
        raise ValidationError("show ID required: pass it or set SPREAKER_DEFAULT_SHOW_ID")
    return show_id


def cmd_episodes_list(client: SpreakerClient, args: argparse.Namespace) -> None:
    """List episodes of a show (or of a user with --user)."""
    try:
        if args.user:
            page = client.episodes.user_episodes(args.user, pagination(args))
        else:
            page = client.shows.episodes(_show_id_or_default(args), pagination(args))
        render_page(args, page, EPISODE_COLUMNS, "No episodes found.")
    except CLIError as e:
        error_output(e)


def cmd_episodes_get(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        episode = client.episodes.get(args.episode_id)
        render_item(args, episode, _episode_pairs(episode), f"{episode.episode_id}\t{episode.title}")
    except CLIError as e:
        error_output(e)


def cmd_episodes_upload(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Upload an audio file as a new episode."""
    try:
        episode = client.episodes.upload(
            args.show_id,
            args.title,
            args.file,
            description=args.description,
            tags=args.tags,
            explicit=args.explicit,
            download_enabled=args.downloadable,
            hidden=args.hidden,
            auto_published_at=args.publish_at,
        )
        render_item(args, episode, _episode_pairs(episode), f"{episode.episode_id}\t{episode.title}")
    except CLIError as e:
        error_output(e)


def cmd_episodes_draft(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        episode = client.episodes.create_draft(
            args.show_id,
            args.title,
            description=args.description,
            tags=args.tags,
            explicit=args.explicit,
            download_enabled=args.downloadable,
            hidden=args.hidden,
        )
        render_item(args, episode, _episode_pairs(episode), f"{episode.episode_id}\t{episode.title}")
    except CLIError as e:
        error_output(e)


def cmd_episodes_update(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        changes = changes_from_args(
            EpisodeChanges,
            args,
            ["title", "description", "tags", "explicit", "download_enabled", "hidden", "show_id", "auto_published_at"],
        )
        episode = client.episodes.update(args.episode_id, changes)
        render_item(args, episode, _episode_pairs(episode), f"{episode.episode_id}\t{episode.title}")
    except CLIError as e:
        error_output(e)


def cmd_episodes_delete(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        if not require_force_or_confirm(args, f"Delete episode {args.episode_id}? This cannot be undone."):
            print("Cancelled.")
            return
        client.episodes.delete(args.episode_id)
        done_output(args, f"Episode {args.episode_id} deleted")
    except CLIError as e:
        error_output(e)


def cmd_episodes_like(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        me = client.users.me()
        if args.remove:
            client.episodes.unlike(me.user_id, args.episode_id)
            done_output(args, f"Removed like from episode {args.episode_id}")
        else:
            client.episodes.like(me.user_id, args.episode_id)
            done_output(args, f"Liked episode {args.episode_id}")
    except CLIError as e:
        error_output(e)


def cmd_episodes_bookmark(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        me = client.users.me()
        if args.remove:
            client.episodes.unbookmark(me.user_id, args.episode_id)
            done_output(args, f"Removed bookmark from episode {args.episode_id}")
        else:
            client.episodes.bookmark(me.user_id, args.episode_id)
            done_output(args, f"Bookmarked episode {args.episode_id}")
    except CLIError as e:
        error_output(e)


def cmd_episodes_likes(client: SpreakerClient, args: argparse.Namespace) -> None:
    """List users who liked an episode."""
    try:
        page = client.episodes.likes(args.episode_id, pagination(args))
        render_page(args, page, USER_COLUMNS, "No likes yet.")
    except CLIError as e:
        error_output(e)


def cmd_episodes_liked(client: SpreakerClient, args: argparse.Namespace) -> None:
    """List episodes liked by a user (default: you)."""
    try:
        user_id = args.user or client.users.me().user_id
        page = client.episodes.liked(user_id, pagination(args))
        render_page(args, page, EPISODE_COLUMNS, "No liked episodes.")
    except CLIError as e:
        error_output(e)


def cmd_episodes_play_url(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        url = client.episodes.play_url(args.episode_id)
        if output_mode(args) == "json":
            success_output({"episode_id": args.episode_id, "url": url})
        else:
            print(url)
    except CLIError as e:
        error_output(e)


def cmd_episodes_download(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Download an episode's audio, or print its URL with --url-only."""
    try:
        if args.url_only:
            url = client.episodes.download_url(args.episode_id)
            if output_mode(args) == "json":
                success_output({"episode_id": args.episode_id, "url": url})
            else:
                print(url)
            return

        destination = args.dest
        if not destination:
            episode = client.episodes.get(args.episode_id)
            safe_title = "".join(c if c.isalnum() or c in " -_" else "_" for c in episode.title).strip()
            destination = f"{safe_title or args.episode_id}.mp3"
        size = client.episodes.download(args.episode_id, destination)
        done_output(args, f"Saved {destination} ({size} bytes)", path=str(destination), bytes=size)
    except CLIError as e:
        error_output(e)
    except OSError as e:
        error_output(ValidationError(f"Cannot write file: {e}"))


# =============================================================================
# CLI Commands - Statistics
# =============================================================================


def _stats_target(client: SpreakerClient, args: argparse.Namespace) -> tuple[str, int]:
    kind = args.kind
    resource_id = args.id
    if kind == "users" and not resource_id:
        resource_id = client.users.me().user_id
    if not resource_id:
        raise ValidationError(f"an ID is required for {kind} statistics")
    return kind, resource_id


def cmd_stats_overall(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Overall counters for a user, show or episode."""
    try:
        kind, resource_id = _stats_target(client, args)
        if kind == "users":
            stats = client.statistics.user(resource_id)
        elif kind == "shows":
            stats = client.statistics.show(resource_id)
        else:
            stats = client.statistics.episode(resource_id)
        values = dataclasses.asdict(stats)
        render_item(args, stats, [(k.replace("_", " ").capitalize(), v) for k, v in values.items()], str(values))
    except CLIError as e:
        error_output(e)


def cmd_stats_series(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Daily time series: plays, likes, followers or listeners."""
    try:
        kind, resource_id = _stats_target(client, args)
        params = stats_params(args)
        metric = args.metric
        if metric == "plays":
            points = client.statistics.plays(kind, resource_id, params)
            columns: list[Column] = [
                ("Date", lambda p: p.date, 12),
                ("Plays", lambda p: p.plays_count, 10),
                ("On demand", lambda p: p.plays_ondemand_count, 10),
                ("Live", lambda p: p.plays_live_count, 8),
                ("Downloads", lambda p: p.downloads_count, 10),
            ]
        else:
            if metric == "likes":
                points = client.statistics.likes(kind, resource_id, params)
            elif metric == "followers":
                if kind != "users":
                    raise ValidationError("followers statistics are only available for users")
                points = client.statistics.followers(resource_id, params)
            else:
                if kind != "shows":
                    raise ValidationError("listeners statistics are only available for shows")
                points = client.statistics.listeners(resource_id, params)
            columns = [("Date", lambda p: p.date, 12), (metric.capitalize(), lambda p: p.count, 10)]
        render_items(args, points, columns, "No data for this period.")
    except CLIError as e:
        error_output(e)


def cmd_stats_shares(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Audience breakdowns: sources, devices, os, geographics."""
    try:
        kind, resource_id = _stats_target(client, args)
        params = stats_params(args)
        share_columns: list[Column] = [("Name", lambda s: s.name, 30), ("Percent", lambda s: s.percentage, 8)]
        metric = args.metric
        if metric == "devices":
            render_items(args, client.statistics.devices(kind, resource_id, params), share_columns, "No data.")
        elif metric == "sources":
            sources = client.statistics.sources(kind, resource_id, params)
            if output_mode(args) == "json":
                success_output(sources)
            else:
                render_items(
                    args,
                    sources.overall,
                    [
                        ("Name", lambda s: s.name, 30),
                        ("Plays", lambda s: s.plays_count, 10),
                        ("Percent", lambda s: s.percentage, 8),
                    ],
                    "No data.",
                )
        else:
            method = client.statistics.os if metric == "os" else client.statistics.geographics
            breakdown = method(kind, resource_id, params)
            if output_mode(args) == "json":
                success_output(breakdown.groups)
                return
            for group, shares in breakdown.groups.items():
                print(f"\n{group.capitalize()}")
                render_items(args, shares, share_columns, "No data.")
    except CLIError as e:
        error_output(e)


def cmd_stats_totals(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Play totals per show (for a user) or per episode (for a show)."""
    try:
        params = stats_params(args)
        if args.show:
            page = client.statistics.episode_play_totals(args.show, params, pagination(args))
        else:
            user_id = args.user or client.users.me().user_id
            page = client.statistics.show_play_totals(user_id, params, pagination(args))
        render_page(
            args,
            page,
            [
                ("ID", lambda t: t.id, 10),
                ("Title", lambda t: t.title, 40),
                ("Plays", lambda t: t.plays_count, 10),
                ("Downloads", lambda t: t.downloads_count, 10),
            ],
            "No data.",
        )
    except CLIError as e:
        error_output(e)


# =============================================================================
# CLI Commands - Discovery
# =============================================================================


def cmd_search(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Search shows or episodes."""
    try:
        if args.type == "shows":
            page = client.search.shows(
                args.query,
                user_id=args.user,
                search_filter=args.filter,
                pagination=pagination(args),
            )
            render_page(args, page, SHOW_COLUMNS, "No shows found.")
        else:
            page = client.search.episodes(
                args.query,
                user_id=args.user,
                show_id=args.show,
                search_filter=args.filter,
                pagination=pagination(args),
            )
            render_page(args, page, EPISODE_COLUMNS, "No episodes found.")
    except CLIError as e:
        error_output(e)


def cmd_explore(client: SpreakerClient, args: argparse.Namespace) -> None:
    """List shows in a category."""
    try:
        page = client.explore.category_shows(args.category_id, pagination(args))
        render_page(
            args,
            page,
            [("ID", lambda s: s.show_id, 10), ("Title", lambda s: s.title, 50), ("URL", lambda s: s.site_url, 40)],
            "No shows in this category.",
        )
    except CLIError as e:
        error_output(e)


def cmd_tags(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Latest episodes with a tag."""
    try:
        page = client.tags.episodes(args.tag, pagination(args))
        render_page(args, page, EPISODE_COLUMNS, f"No episodes tagged '{args.tag}'.")
    except CLIError as e:
        error_output(e)


# =============================================================================
# CLI Commands - Chapters / Cuepoints / Messages
# =============================================================================


CHAPTER_COLUMNS: list[Column] = [
    ("ID", lambda c: c.chapter_id, 10),
    ("Title", lambda c: c.title, 40),
    ("Starts (ms)", lambda c: c.starts_at, 12),
    ("URL", lambda c: c.external_url, 30),
]


def cmd_chapters_list(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        page = client.chapters.list(args.episode_id, pagination(args))
        render_page(args, page, CHAPTER_COLUMNS, "No chapters.")
    except CLIError as e:
        error_output(e)


def cmd_chapters_add(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        chapter = client.chapters.add(
            args.episode_id,
            args.starts_at,
            args.title,
            external_url=args.url,
            image_file=args.image,
            image_crop=args.image_crop,
        )
        render_items(args, [chapter], CHAPTER_COLUMNS, "")
    except CLIError as e:
        error_output(e)


def cmd_chapters_update(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        chapter = client.chapters.update(
            args.episode_id,
            args.chapter_id,
            starts_at=args.starts_at,
            title=args.title,
            external_url=args.url,
            image_file=args.image,
            image_crop=args.image_crop,
        )
        render_items(args, [chapter], CHAPTER_COLUMNS, "")
    except CLIError as e:
        error_output(e)


def cmd_chapters_delete(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        if args.chapter_id is None:
            if not require_force_or_confirm(args, f"Delete ALL chapters of episode {args.episode_id}?"):
                print("Cancelled.")
                return
            client.chapters.delete_all(args.episode_id)
            done_output(args, f"All chapters of episode {args.episode_id} deleted")
        else:
            client.chapters.delete(args.episode_id, args.chapter_id)
            done_output(args, f"Chapter {args.chapter_id} deleted")
    except CLIError as e:
        error_output(e)


def parse_cuepoint(value: str) -> Cuepoint:
    """argparse type for TIMECODE[:ADS] cuepoint arguments."""
    timecode, _, ads = value.partition(":")
    try:
        return Cuepoint(timecode=int(timecode), ads_max_count=int(ads) if ads else 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid cuepoint {value!r}, expected TIMECODE[:ADS]")


def cmd_cuepoints_list(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        cuepoints = client.cuepoints.list(args.episode_id)
        render_items(
            args,
            cuepoints,
            [("Timecode (ms)", lambda c: c.timecode, 14), ("Max ads", lambda c: c.ads_max_count, 8)],
            "No cuepoints.",
        )
    except CLIError as e:
        error_output(e)


def cmd_cuepoints_set(client: SpreakerClient, args: argparse.Namespace) -> None:
    """Replace all cuepoints of an episode."""
    try:
        client.cuepoints.update(args.episode_id, args.cuepoints)
        done_output(args, f"Set {len(args.cuepoints)} cuepoint(s) on episode {args.episode_id}")
    except CLIError as e:
        error_output(e)


def cmd_cuepoints_delete(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        client.cuepoints.delete(args.episode_id)
        done_output(args, f"All cuepoints of episode {args.episode_id} deleted")
    except CLIError as e:
        error_output(e)


def cmd_messages_list(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        page = client.messages.list(args.episode_id, pagination(args))
        render_page(
            args,
            page,
            [
                ("ID", lambda m: m.message_id, 10),
                ("Author", lambda m: m.author_username, 20),
                ("Date", lambda m: m.created_at, 19),
                ("Text", lambda m: m.text.replace("\n", " "), 60),
            ],
            "No messages.",
        )
    except CLIError as e:
        error_output(e)


def cmd_messages_post(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        text = sys.stdin.read() if args.text == "-" else args.text
        client.messages.create(args.episode_id, text.strip())
        done_output(args, f"Message posted on episode {args.episode_id}")
    except CLIError as e:
        error_output(e)


def cmd_messages_delete(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        client.messages.delete(args.episode_id, args.message_id)
        done_output(args, f"Message {args.message_id} deleted")
    except CLIError as e:
        error_output(e)


def cmd_messages_report(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        client.messages.report_abuse(args.episode_id, args.message_id)
        done_output(args, f"Message {args.message_id} reported")
    except CLIError as e:
        error_output(e)


# =============================================================================
# CLI Commands - Miscellaneous
# =============================================================================


def cmd_misc_categories(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        if args.googleplay:
            categories = client.misc.googleplay_categories()
        else:
            categories = client.misc.show_categories(args.locale)
        render_items(
            args,
            categories,
            [
                ("ID", lambda c: c.category_id, 8),
                ("Name", lambda c: ("  " * (c.level - 1)) + c.name, 40),
                ("Level", lambda c: c.level, 6),
            ],
            "No categories.",
        )
    except CLIError as e:
        error_output(e)


def cmd_misc_languages(client: SpreakerClient, args: argparse.Namespace) -> None:
    try:
        languages = client.misc.languages(args.locale)
        render_items(args, languages, [("Code", lambda lang: lang.code, 8), ("Name", lambda lang: lang.name, 30)], "")
    except CLIError as e:
        error_output(e)


# =============================================================================
# Main CLI
# =============================================================================


def _add_pagination(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", "-l", type=int, help=f"Max results (default {HUMAN_LIMIT} on a TTY)")
    parser.add_argument("--offset", type=int, help="Offset for pagination")


def _add_stats_range(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--from", dest="from_date", help="Start date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="to_date", help="End date (YYYY-MM-DD)")
    parser.add_argument("--group", choices=["day", "week", "month"], help="Group results by period")
    parser.add_argument("--precision", type=int, help="Precision for percentages")


def _add_stats_target(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("kind", choices=sorted(STATISTICS_KINDS), help="Resource kind")
    parser.add_argument("id", type=int, nargs="?", help="Resource ID (users default to you)")


def _add_episode_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", "-t", required=True, help="Episode title")
    parser.add_argument("--description", "-d", help="Episode description")
    parser.add_argument("--tags", type=parse_tags, help="Tags (comma-separated)")
    parser.add_argument("--explicit", action="store_true", help="Mark as explicit content")
    parser.add_argument("--downloadable", action="store_true", help="Allow downloads")
    parser.add_argument("--hidden", action="store_true", help="Hide the episode")


def create_parser() -> argparse.ArgumentParser:  # noqa: PLR0915
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="spreaker",
        description="Spreaker CLI - Command-line interface for the Spreaker podcast API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output Modes:
  TTY (human):  Pretty tables, limited rows
  Pipe (LLM):   JSON
  --output plain: tab-separated ID and title

Examples:
  spreaker me
  spreaker shows list
  spreaker episodes list 12345 --limit 5
  spreaker episodes upload 12345 ./episode.mp3 --title "Pilot"
  spreaker search episodes "history" | jq '.data[].title'
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--token", help="API token (overrides SPREAKER_TOKEN)")
    parser.add_argument("--api-url", help="API base URL (overrides SPREAKER_API_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds (default 30)")
    parser.add_argument("--output", "-o", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests to stderr")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ========== Account ==========
    login = subparsers.add_parser("login", help="Check an API token")
    login.set_defaults(func=cmd_login)

    me = subparsers.add_parser("me", help="Show your profile")
    me.set_defaults(func=cmd_me)

    config = subparsers.add_parser("config", help="Show configuration")
    config.set_defaults(func=lambda _c, _a: config.print_help())
    config_sub = config.add_subparsers(dest="subcommand")
    c_show = config_sub.add_parser("show", help="Show effective settings")
    c_show.set_defaults(func=cmd_config_show)

    # ========== Users ==========
    users = subparsers.add_parser("users", help="User profiles and social graph")
    users.set_defaults(func=lambda _c, _a: users.print_help())
    users_sub = users.add_subparsers(dest="subcommand")

    u_get = users_sub.add_parser("get", help="Get a user's profile")
    u_get.add_argument("user_id", type=int, help="User ID")
    u_get.set_defaults(func=cmd_users_get)

    u_update = users_sub.add_parser("update", help="Update your profile")
    u_update.add_argument("--fullname", help="Full name")
    u_update.add_argument("--description", help="Bio")
    u_update.add_argument("--location", help="Location")
    u_update.add_argument("--username", help="Username")
    u_update.add_argument("--contact-email", dest="contact_email", help="Contact email")
    u_update.add_argument("--content-languages", dest="content_languages", help="Comma-separated language codes")
    u_update.add_argument("--show-age", dest="show_age", type=parse_bool, help="true/false")
    u_update.set_defaults(func=cmd_users_update)

    u_followers = users_sub.add_parser("followers", help="List a user's followers")
    u_followers.add_argument("user_id", type=int, help="User ID")
    _add_pagination(u_followers)
    u_followers.set_defaults(func=cmd_users_followers)

    u_followings = users_sub.add_parser("followings", help="List who a user follows")
    u_followings.add_argument("user_id", type=int, help="User ID")
    _add_pagination(u_followings)
    u_followings.set_defaults(func=cmd_users_followings)

    u_follow = users_sub.add_parser("follow", help="Follow a user")
    u_follow.add_argument("user_id", type=int, help="User ID to follow")
    u_follow.add_argument("--unfollow", action="store_true", help="Unfollow instead")
    u_follow.set_defaults(func=cmd_users_follow)

    u_blocks = users_sub.add_parser("blocks", help="List users you blocked")
    _add_pagination(u_blocks)
    u_blocks.set_defaults(func=cmd_users_blocks)

    u_block = users_sub.add_parser("block", help="Block a user")
    u_block.add_argument("user_id", type=int, help="User ID to block")
    u_block.add_argument("--unblock", action="store_true", help="Unblock instead")
    u_block.set_defaults(func=cmd_users_block)

    # ========== Shows ==========
    shows = subparsers.add_parser("shows", help="List and manage shows")
    shows.set_defaults(func=lambda _c, _a: shows.print_help())
    shows_sub = shows.add_subparsers(dest="subcommand")

    s_list = shows_sub.add_parser("list", help="List your shows")
    s_list.add_argument("--user", type=int, help="List another user's shows")
    _add_pagination(s_list)
    s_list.set_defaults(func=cmd_shows_list)

    s_get = shows_sub.add_parser("get", help="Get show details")
    s_get.add_argument("show_id", type=int, help="Show ID")
    s_get.set_defaults(func=cmd_shows_get)

    s_create = shows_sub.add_parser("create", help="Create a show")
    s_create.add_argument("--title", required=True, help="Show title")
    s_create.add_argument("--description", help="Show description")
    s_create.add_argument("--language", help="Language code (e.g., en, it, es)")
    s_create.add_argument("--category", dest="category_id", type=int, help="Category ID")
    s_create.add_argument("--explicit", action="store_true", help="Mark as explicit content")
    s_create.set_defaults(func=cmd_shows_create)

    s_update = shows_sub.add_parser("update", help="Update a show")
    s_update.add_argument("show_id", type=int, help="Show ID")
    s_update.add_argument("--title", help="Show title")
    s_update.add_argument("--description", help="Show description")
    s_update.add_argument("--language", help="Language code")
    s_update.add_argument("--category", dest="category_id", type=int, help="Category ID")
    s_update.add_argument("--explicit", type=parse_bool, help="true/false")
    s_update.set_defaults(func=cmd_shows_update)

    s_delete = shows_sub.add_parser("delete", help="Delete a show")
    s_delete.add_argument("show_id", type=int, help="Show ID")
    s_delete.add_argument("--force", "-f", action="store_true", help="Skip confirmation prompt")
    s_delete.set_defaults(func=cmd_shows_delete)

    s_favorites = shows_sub.add_parser("favorites", help="List favorite shows")
    s_favorites.add_argument("--user", type=int, help="Another user's favorites")
    _add_pagination(s_favorites)
    s_favorites.set_defaults(func=cmd_shows_favorites)

    s_favorite = shows_sub.add_parser("favorite", help="Add a show to your favorites")
    s_favorite.add_argument("show_id", type=int, help="Show ID")
    s_favorite.add_argument("--remove", action="store_true", help="Remove from favorites instead")
    s_favorite.set_defaults(func=cmd_shows_favorite)

    # ========== Episodes ==========
    episodes = subparsers.add_parser("episodes", help="List and manage episodes")
    episodes.set_defaults(func=lambda _c, _a: episodes.print_help())
    episodes_sub = episodes.add_subparsers(dest="subcommand")

    e_list = episodes_sub.add_parser("list", help="List episodes of a show")
    e_list.add_argument("show_id", type=int, nargs="?", help="Show ID (default: SPREAKER_DEFAULT_SHOW_ID)")
    e_list.add_argument("--user", type=int, help="List a user's episodes instead")
    _add_pagination(e_list)
    e_list.set_defaults(func=cmd_episodes_list)

    e_get = episodes_sub.add_parser("get", help="Get episode details")
    e_get.add_argument("episode_id", type=int, help="Episode ID")
    e_get.set_defaults(func=cmd_episodes_get)

    e_upload = episodes_sub.add_parser("upload", help="Upload a new episode")
    e_upload.add_argument("show_id", type=int, help="Show ID")
    e_upload.add_argument("file", help="Audio file to upload")
    _add_episode_options(e_upload)
    e_upload.add_argument("--publish-at", help='Schedule publishing ("2020-04-20 18:00:00")')
    e_upload.set_defaults(func=cmd_episodes_upload)

    e_draft = episodes_sub.add_parser("draft", help="Create a draft episode without audio")
    e_draft.add_argument("show_id", type=int, help="Show ID")
    _add_episode_options(e_draft)
    e_draft.set_defaults(func=cmd_episodes_draft)

    e_update = episodes_sub.add_parser("update", help="Update an episode")
    e_update.add_argument("episode_id", type=int, help="Episode ID")
    e_update.add_argument("--title", help="Episode title")
    e_update.add_argument("--description", help="Episode description")
    e_update.add_argument("--tags", type=parse_tags, help="Tags (comma-separated)")
    e_update.add_argument("--explicit", type=parse_bool, help="true/false")
    e_update.add_argument("--downloadable", dest="download_enabled", type=parse_bool, help="true/false")
    e_update.add_argument("--hidden", type=parse_bool, help="true/false")
    e_update.add_argument("--show", dest="show_id", type=int, help="Move to another show")
    e_update.add_argument("--publish-at", dest="auto_published_at", help='Reschedule ("" to unschedule)')
    e_update.set_defaults(func=cmd_episodes_update)

    e_delete = episodes_sub.add_parser("delete", help="Delete an episode")
    e_delete.add_argument("episode_id", type=int, help="Episode ID")
    e_delete.add_argument("--force", "-f", action="store_true", help="Skip confirmation prompt")
    e_delete.set_defaults(func=cmd_episodes_delete)

    e_like = episodes_sub.add_parser("like", help="Like an episode")
    e_like.add_argument("episode_id", type=int, help="Episode ID")
    e_like.add_argument("--remove", action="store_true", help="Remove the like instead")
    e_like.set_defaults(func=cmd_episodes_like)

    e_bookmark = episodes_sub.add_parser("bookmark", help="Bookmark an episode")
    e_bookmark.add_argument("episode_id", type=int, help="Episode ID")
    e_bookmark.add_argument("--remove", action="store_true", help="Remove the bookmark instead")
    e_bookmark.set_defaults(func=cmd_episodes_bookmark)

    e_likes = episodes_sub.add_parser("likes", help="List users who liked an episode")
    e_likes.add_argument("episode_id", type=int, help="Episode ID")
    _add_pagination(e_likes)
    e_likes.set_defaults(func=cmd_episodes_likes)

    e_liked = episodes_sub.add_parser("liked", help="List liked episodes")
    e_liked.add_argument("--user", type=int, help="Another user's likes")
    _add_pagination(e_liked)
    e_liked.set_defaults(func=cmd_episodes_liked)

    e_play = episodes_sub.add_parser("play-url", help="Print the streaming URL")
    e_play.add_argument("episode_id", type=int, help="Episode ID")
    e_play.set_defaults(func=cmd_episodes_play_url)

    e_download = episodes_sub.add_parser("download", help="Download episode audio")
    e_download.add_argument("episode_id", type=int, help="Episode ID")
    e_download.add_argument("--dest", "-O", help="Output file path (default: episode title)")
    e_download.add_argument("--url-only", "-u", action="store_true", help="Only print the download URL")
    e_download.set_defaults(func=cmd_episodes_download)

    # ========== Statistics ==========
    stats = subparsers.add_parser("stats", help="Statistics for users, shows and episodes")
    stats.set_defaults(func=lambda _c, _a: stats.print_help())
    stats_sub = stats.add_subparsers(dest="subcommand")

    st_overall = stats_sub.add_parser("overall", help="Overall counters")
    _add_stats_target(st_overall)
    st_overall.set_defaults(func=cmd_stats_overall)

    st_series = stats_sub.add_parser("series", help="Daily time series")
    st_series.add_argument("metric", choices=["plays", "likes", "followers", "listeners"], help="Metric")
    _add_stats_target(st_series)
    _add_stats_range(st_series)
    st_series.set_defaults(func=cmd_stats_series)

    st_shares = stats_sub.add_parser("shares", help="Audience breakdowns")
    st_shares.add_argument("metric", choices=["sources", "devices", "os", "geographics"], help="Breakdown")
    _add_stats_target(st_shares)
    _add_stats_range(st_shares)
    st_shares.set_defaults(func=cmd_stats_shares)

    st_totals = stats_sub.add_parser("totals", help="Play totals per show or per episode")
    st_totals.add_argument("--user", type=int, help="Per-show totals for a user (default: you)")
    st_totals.add_argument("--show", type=int, help="Per-episode totals for a show")
    _add_stats_range(st_totals)
    _add_pagination(st_totals)
    st_totals.set_defaults(func=cmd_stats_totals)

    # ========== Discovery ==========
    search = subparsers.add_parser("search", help="Search shows or episodes")
    search.add_argument("type", choices=["shows", "episodes"], help="What to search")
    search.add_argument("query", help="Search terms")
    search.add_argument("--user", type=int, help="Only within a user's catalog")
    search.add_argument("--show", type=int, help="Only within a show (episodes)")
    search.add_argument("--filter", choices=["listenable", "editable"], help="Result filter")
    _add_pagination(search)
    search.set_defaults(func=cmd_search)

    explore = subparsers.add_parser("explore", help="Browse shows by category")
    explore.add_argument("category_id", type=int, help="Category ID (see 'misc categories')")
    _add_pagination(explore)
    explore.set_defaults(func=cmd_explore)

    tags = subparsers.add_parser("tags", help="Latest episodes with a tag")
    tags.add_argument("tag", help="Tag name")
    _add_pagination(tags)
    tags.set_defaults(func=cmd_tags)

    # ========== Chapters ==========
    chapters = subparsers.add_parser("chapters", help="Episode chapters")
    chapters.set_defaults(func=lambda _c, _a: chapters.print_help())
    chapters_sub = chapters.add_subparsers(dest="subcommand")

    ch_list = chapters_sub.add_parser("list", help="List chapters")
    ch_list.add_argument("episode_id", type=int, help="Episode ID")
    _add_pagination(ch_list)
    ch_list.set_defaults(func=cmd_chapters_list)

    ch_add = chapters_sub.add_parser("add", help="Add a chapter")
    ch_add.add_argument("episode_id", type=int, help="Episode ID")
    ch_add.add_argument("--starts-at", dest="starts_at", type=int, required=True, help="Offset in milliseconds")
    ch_add.add_argument("--title", required=True, help="Chapter title")
    ch_add.add_argument("--url", help="External URL")
    ch_add.add_argument("--image", help="Image URL")
    ch_add.add_argument("--image-crop", dest="image_crop", help="Crop as x1,y1,x2,y2")
    ch_add.set_defaults(func=cmd_chapters_add)

    ch_update = chapters_sub.add_parser("update", help="Update a chapter")
    ch_update.add_argument("episode_id", type=int, help="Episode ID")
    ch_update.add_argument("chapter_id", type=int, help="Chapter ID")
    ch_update.add_argument("--starts-at", dest="starts_at", type=int, help="Offset in milliseconds")
    ch_update.add_argument("--title", help="Chapter title")
    ch_update.add_argument("--url", help="External URL")
    ch_update.add_argument("--image", help="Image URL")
    ch_update.add_argument("--image-crop", dest="image_crop", help="Crop as x1,y1,x2,y2")
    ch_update.set_defaults(func=cmd_chapters_update)

    ch_delete = chapters_sub.add_parser("delete", help="Delete one chapter, or all without a chapter ID")
    ch_delete.add_argument("episode_id", type=int, help="Episode ID")
    ch_delete.add_argument("chapter_id", type=int, nargs="?", help="Chapter ID")
    ch_delete.add_argument("--force", "-f", action="store_true", help="Skip confirmation prompt")
    ch_delete.set_defaults(func=cmd_chapters_delete)

    # ========== Cuepoints ==========
    cuepoints = subparsers.add_parser("cuepoints", help="Episode ad cuepoints")
    cuepoints.set_defaults(func=lambda _c, _a: cuepoints.print_help())
    cuepoints_sub = cuepoints.add_subparsers(dest="subcommand")

    cp_list = cuepoints_sub.add_parser("list", help="List cuepoints")
    cp_list.add_argument("episode_id", type=int, help="Episode ID")
    cp_list.set_defaults(func=cmd_cuepoints_list)

    cp_set = cuepoints_sub.add_parser("set", help="Replace all cuepoints")
    cp_set.add_argument("episode_id", type=int, help="Episode ID")
    cp_set.add_argument("cuepoints", type=parse_cuepoint, nargs="+", help="TIMECODE[:ADS] in milliseconds")
    cp_set.set_defaults(func=cmd_cuepoints_set)

    cp_delete = cuepoints_sub.add_parser("delete", help="Delete all cuepoints")
    cp_delete.add_argument("episode_id", type=int, help="Episode ID")
    cp_delete.set_defaults(func=cmd_cuepoints_delete)

    # ========== Messages ==========
    messages = subparsers.add_parser("messages", help="Episode messages")
    messages.set_defaults(func=lambda _c, _a: messages.print_help())
    messages_sub = messages.add_subparsers(dest="subcommand")

    m_list = messages_sub.add_parser("list", help="List messages")
    m_list.add_argument("episode_id", type=int, help="Episode ID")
    _add_pagination(m_list)
    m_list.set_defaults(func=cmd_messages_list)

    m_post = messages_sub.add_parser("post", help="Leave a message")
    m_post.add_argument("episode_id", type=int, help="Episode ID")
    m_post.add_argument("text", help="Message text (or - for stdin)")
    m_post.set_defaults(func=cmd_messages_post)

    m_delete = messages_sub.add_parser("delete", help="Delete a message")
    m_delete.add_argument("episode_id", type=int, help="Episode ID")
    m_delete.add_argument("message_id", type=int, help="Message ID")
    m_delete.set_defaults(func=cmd_messages_delete)

    m_report = messages_sub.add_parser("report", help="Report a message as abusive")
    m_report.add_argument("episode_id", type=int, help="Episode ID")
    m_report.add_argument("message_id", type=int, help="Message ID")
    m_report.set_defaults(func=cmd_messages_report)

    # ========== Misc ==========
    misc = subparsers.add_parser("misc", help="Categories and languages")
    misc.set_defaults(func=lambda _c, _a: misc.print_help())
    misc_sub = misc.add_subparsers(dest="subcommand")

    mi_categories = misc_sub.add_parser("categories", help="List show categories")
    mi_categories.add_argument("--locale", help="Localize names (e.g., it_IT)")
    mi_categories.add_argument("--googleplay", action="store_true", help="Google Play categories instead")
    mi_categories.set_defaults(func=cmd_misc_categories)

    mi_languages = misc_sub.add_parser("languages", help="List show languages")
    mi_languages.add_argument("--locale", help="Localize names (e.g., it_IT)")
    mi_languages.set_defaults(func=cmd_misc_languages)

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    configure_logging(args.verbose)

    try:
        args.config = load_config(
            token=args.token,
            api_url=args.api_url,
            timeout=args.timeout,
            output_format=args.output,
        )
    except CLIError as e:
        error_output(e)

    logger.debug("config: %s", args.config.to_dict())

    # Create client
    client = SpreakerClient(args.config.client_config())

    # Run command (all subparsers have default funcs that print help)
    args.func(client, args)


if __name__ == "__main__":
    main()

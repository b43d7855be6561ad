"""
SDK tests - request paths, fields and typed results for each sub-client.
"""

import io
import json
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from spreaker_cli.core.client import ClientConfig
from spreaker_cli.core.errors import AuthRequiredError, PayloadDecodeError, ValidationError
from spreaker_cli.core.types import (
    Cuepoint,
    Episode,
    EpisodeChanges,
    PaginationParams,
    ShowChanges,
    StatisticsParams,
    UserChanges,
)
from spreaker_cli.sdk import MAX_MESSAGE_LENGTH, SpreakerClient

API = "https://api.spreaker.com/v2"


@pytest.fixture
def client():
    return SpreakerClient(ClientConfig(bearer_token="tok"))


def _form_field(body: bytes, name: str) -> str | None:
    """Extract a plain field value from a multipart body."""
    marker = f'name="{name}"\r\n\r\n'.encode()
    if marker not in body:
        return None
    value = body.split(marker, 1)[1]
    return value.split(b"\r\n", 1)[0].decode()


# =============================================================================
# Users
# =============================================================================


def test_me_returns_user(fake_api, client):
    fake_api.reply({"user": {"user_id": 9, "fullname": "Jane Host", "username": "jane", "plan": "anchor"}})

    user = client.users.me()

    assert user.user_id == 9
    assert user.username == "jane"
    assert fake_api.last_request.full_url == f"{API}/me"


def test_me_without_token_fails_locally(fake_api):
    with pytest.raises(AuthRequiredError):
        SpreakerClient().users.me()
    fake_api.urlopen.assert_not_called()


def test_my_shows_resolves_user_first(fake_api, client):
    fake_api.reply({"user": {"user_id": 9}})
    fake_api.reply({"items": [{"show_id": 1, "title": "One"}], "next_url": ""})

    page = client.users.my_shows(PaginationParams(limit=5))

    assert [s.show_id for s in page.items] == [1]
    assert fake_api.last_request.full_url == f"{API}/users/9/shows?limit=5"


def test_update_user_sends_only_set_fields(fake_api, client):
    fake_api.reply({"user": {"user_id": 9, "fullname": ""}})

    client.users.update(9, UserChanges(fullname="", show_age=False))

    body = fake_api.last_request.data
    assert _form_field(body, "fullname") == ""
    assert _form_field(body, "show_age") == "false"
    assert _form_field(body, "description") is None


def test_follow_and_unfollow_paths(fake_api, client):
    fake_api.reply_raw(b"").reply_raw(b"")

    client.users.follow(9, 42)
    client.users.unfollow(9, 42)

    assert [(r.get_method(), r.full_url) for r in fake_api.requests] == [
        ("PUT", f"{API}/users/9/followings/42"),
        ("DELETE", f"{API}/users/9/followings/42"),
    ]


# =============================================================================
# Shows
# =============================================================================


def test_create_show_sends_given_fields(fake_api, client):
    fake_api.reply({"show": {"show_id": 77, "title": "New", "language": "en"}})

    show = client.shows.create("New", language="en", explicit=True)

    assert show.show_id == 77
    body = fake_api.last_request.data
    assert _form_field(body, "title") == "New"
    assert _form_field(body, "explicit") == "true"
    assert _form_field(body, "description") is None


def test_update_show_can_send_false(fake_api, client):
    fake_api.reply({"show": {"show_id": 3}})

    client.shows.update(3, ShowChanges(explicit=False))

    request = fake_api.last_request
    assert request.full_url == f"{API}/shows/3"
    assert _form_field(request.data, "explicit") == "false"
    assert _form_field(request.data, "title") is None


def test_empty_change_set_is_rejected_without_request(fake_api, client):
    with pytest.raises(ValidationError):
        client.shows.update(3, ShowChanges())
    fake_api.urlopen.assert_not_called()


def test_delete_show_requires_token(fake_api):
    with pytest.raises(AuthRequiredError):
        SpreakerClient().shows.delete(3)
    fake_api.urlopen.assert_not_called()


def test_all_episodes_walks_pages(fake_api, client):
    fake_api.reply({"items": [{"episode_id": 1}], "next_url": f"{API}/shows/3/episodes?last_id=1"})
    fake_api.reply({"items": [{"episode_id": 2}], "next_url": ""})

    episodes = client.shows.all_episodes(3)

    assert [e.episode_id for e in episodes] == [1, 2]


# =============================================================================
# Episodes
# =============================================================================


def test_upload_episode(fake_api, client, tmp_path):
    audio = tmp_path / "pilot.mp3"
    audio.write_bytes(b"audio")
    fake_api.reply({"episode": {"episode_id": 5, "title": "Pilot", "duration": 3723000}})

    episode = client.episodes.upload(3, "Pilot", audio, tags=["news", "daily"], hidden=True)

    assert episode.duration_formatted == "1:02:03"
    request = fake_api.last_request
    assert request.full_url == f"{API}/shows/3/episodes"
    assert _form_field(request.data, "tags") == "news,daily"
    assert _form_field(request.data, "hidden") == "true"
    assert b'filename="pilot.mp3"' in request.data


def test_update_episode_can_unschedule(fake_api, client):
    fake_api.reply({"episode": {"episode_id": 5}})

    client.episodes.update(5, EpisodeChanges(auto_published_at=""))

    assert _form_field(fake_api.last_request.data, "auto_published_at") == ""


def test_is_liked_maps_not_found_to_false(fake_api, client):
    fake_api.fail(404, messages=["not found"])
    fake_api.reply_raw(b"")

    assert client.episodes.is_liked(9, 5) is False
    assert client.episodes.is_liked(9, 5) is True


def test_play_url(fake_api, client):
    fake_api.reply({"url": "https://cdn.spreaker.com/5.mp3"})

    assert client.episodes.play_url(5) == "https://cdn.spreaker.com/5.mp3"
    assert fake_api.last_request.full_url == f"{API}/episodes/5/play"


def test_download_url_uses_redirect_location(client):
    redirect = urllib.error.HTTPError(
        f"{API}/episodes/5/download",
        302,
        "Found",
        {"Location": "https://dts.example.com/5.mp3"},
        io.BytesIO(b""),
    )
    opener = MagicMock()
    opener.open.side_effect = redirect

    with patch("urllib.request.build_opener", return_value=opener):
        assert client.episodes.download_url(5) == "https://dts.example.com/5.mp3"


def test_duration_formatted_short():
    assert Episode(episode_id=1, duration=65_000).duration_formatted == "1:05"


# =============================================================================
# Chapters / Cuepoints / Messages
# =============================================================================


def test_add_chapter_sends_json(fake_api, client):
    fake_api.reply({"chapter": {"chapter_id": 11, "starts_at": 0, "title": "Intro"}})

    chapter = client.chapters.add(5, 0, "Intro", external_url="https://example.com")

    assert chapter.chapter_id == 11
    assert json.loads(fake_api.last_request.data) == {
        "starts_at": "0",
        "title": "Intro",
        "external_url": "https://example.com",
    }


def test_cuepoints_update_encodes_list(fake_api, client):
    fake_api.reply_raw(b"")

    client.cuepoints.update(5, [Cuepoint(timecode=1000, ads_max_count=2)])

    body = json.loads(fake_api.last_request.data)
    assert json.loads(body["cuepoints"]) == [{"timecode": 1000, "ads_max_count": 2}]


def test_cuepoints_list_bad_shape_is_decode_error(fake_api, client):
    fake_api.reply({"cuepoints": None})

    with pytest.raises(PayloadDecodeError):
        client.cuepoints.list(5)


def test_message_length_is_checked_locally(fake_api, client):
    with pytest.raises(ValidationError):
        client.messages.create(5, "x" * (MAX_MESSAGE_LENGTH + 1))
    with pytest.raises(ValidationError):
        client.messages.create(5, "")
    fake_api.urlopen.assert_not_called()


def test_report_abuse_path(fake_api, client):
    fake_api.reply_raw(b"")

    client.messages.report_abuse(5, 8)

    assert fake_api.last_request.full_url == f"{API}/episodes/5/messages/8/report-abuse"


# =============================================================================
# Statistics
# =============================================================================


def test_plays_statistics(fake_api, client):
    fake_api.reply({"statistics": [{"date": "2024-01-01", "plays_count": 4, "downloads_count": 1}]})

    points = client.statistics.plays("episodes", 5, StatisticsParams(from_date="2024-01-01", group="day"))

    assert points[0].plays_count == 4
    assert fake_api.last_request.full_url == f"{API}/episodes/5/statistics/plays?from=2024-01-01&group=day"


def test_unsupported_metric_is_rejected(fake_api, client):
    with pytest.raises(ValidationError):
        client.statistics.geographics("episodes", 5)
    fake_api.urlopen.assert_not_called()


def test_os_breakdown(fake_api, client):
    fake_api.reply({"statistics": {"desktop": [{"name": "Windows", "percentage": 60}], "mobile": []}})

    breakdown = client.statistics.os("shows", 3)

    assert breakdown.groups["desktop"][0].name == "Windows"
    assert breakdown.groups["mobile"] == []


def test_episode_play_totals(fake_api, client):
    fake_api.reply({"items": [{"episode_id": 5, "title": "Pilot", "plays_count": 10}], "next_url": ""})

    page = client.statistics.episode_play_totals(3)

    assert page.items[0].id == 5
    assert fake_api.last_request.full_url == f"{API}/shows/3/episodes/statistics/plays/totals"


# =============================================================================
# Search / Explore / Tags / Misc
# =============================================================================


def test_search_episodes_in_show(fake_api, client):
    fake_api.reply({"items": [], "next_url": ""})

    client.search.episodes("history", show_id=7, search_filter="listenable")

    assert fake_api.last_request.full_url == f"{API}/search/shows/7?type=episodes&q=history&filter=listenable"


def test_search_rejects_user_and_show_together(fake_api, client):
    with pytest.raises(ValidationError):
        client.search.episodes("history", user_id=1, show_id=7)
    fake_api.urlopen.assert_not_called()


def test_tag_is_path_escaped(fake_api, client):
    fake_api.reply({"items": [], "next_url": ""})

    client.tags.episodes("true crime")

    assert fake_api.last_request.full_url == f"{API}/tags/true%20crime/episodes"


def test_explore_category(fake_api, client):
    fake_api.reply({"items": [{"show_id": 1, "title": "A"}], "next_url": ""})

    page = client.explore.category_shows(12)

    assert page.items[0].title == "A"
    assert fake_api.last_request.full_url == f"{API}/explore/categories/12/items"


def test_languages_sorted_by_code(fake_api, client):
    fake_api.reply({"languages": {"it": "Italiano", "en": "English"}})

    languages = client.misc.languages("it_IT")

    assert [lang.code for lang in languages] == ["en", "it"]
    assert fake_api.last_request.full_url == f"{API}/show-languages?c=it_IT"

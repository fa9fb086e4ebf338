"""Filename fragment -> canonical URL parsing.

Saved images often carry their source URL flattened into the filename
(slashes and colons stripped), e.g. `httpsx.comjill_07kmstatus1502553581789978626photo1`.
Each matcher recognizes one platform's fragment and rebuilds the URL.
Matchers are tried in order; the first one that can handle the input wins.
"""

import re
from collections.abc import Callable
from typing import NamedTuple


class Matcher(NamedTuple):
    name: str
    can_handle: Callable[[str], bool]
    parse: Callable[[str], str]


_PIXIV = re.compile(r"(\d{8,10})_p\d+")
_TWITTER = re.compile(r"https(?:x|twitter)\.com(.*?)status(\d+)(?:photo\d+)?")
_DANBOORU = re.compile(r"^httpsdanbooru\.donmai\.usposts(\d+)$")
_BILIBILI_OPUS = re.compile(r"httpswww\.bilibili\.comopus(\d+)(?:#\d+)?")
_BILIBILI_VIDEO = re.compile(r"httpswww\.bilibili\.comvideo([a-zA-Z0-9]+)")


def _pattern_matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    return lambda text: pattern.search(text) is not None


def _parse_pixiv(text: str) -> str:
    # 12345678_p0 -> artwork id
    m = _PIXIV.search(text)
    return f"https://www.pixiv.net/artworks/{m.group(1)}" if m else ""


def _can_handle_twitter(text: str) -> bool:
    return "httpsx.com" in text or "httpstwitter.com" in text


def _parse_twitter(text: str) -> str:
    m = _TWITTER.search(text)
    if not m:
        return text
    username = m.group(1).removeprefix("/").removesuffix("/")
    return f"https://x.com/{username}/status/{m.group(2)}"


def _parse_danbooru(text: str) -> str:
    m = _DANBOORU.search(text)
    return f"https://danbooru.donmai.us/posts/{m.group(1)}" if m else ""


def _parse_bilibili_opus(text: str) -> str:
    # Trailing #N image index is dropped
    m = _BILIBILI_OPUS.search(text)
    return f"https://www.bilibili.com/opus/{m.group(1)}" if m else ""


def _parse_bilibili_video(text: str) -> str:
    m = _BILIBILI_VIDEO.search(text)
    return f"https://www.bilibili.com/video/{m.group(1)}" if m else ""


MATCHERS: tuple[Matcher, ...] = (
    Matcher("pixiv", _pattern_matches(_PIXIV), _parse_pixiv),
    Matcher("twitter", _can_handle_twitter, _parse_twitter),
    Matcher("danbooru", _pattern_matches(_DANBOORU), _parse_danbooru),
    Matcher("bilibili-opus", _pattern_matches(_BILIBILI_OPUS), _parse_bilibili_opus),
    Matcher("bilibili-video", _pattern_matches(_BILIBILI_VIDEO), _parse_bilibili_video),
)


def parse_filename(raw: str | None, matchers: tuple[Matcher, ...] = MATCHERS) -> str:
    """Return the canonical URL for `raw`, or "" when no matcher applies."""
    if raw is None or not raw.strip():
        return ""
    for matcher in matchers:
        if matcher.can_handle(raw):
            return matcher.parse(raw)
    return ""

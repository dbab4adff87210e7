import re

from newsboat_summarize.types import ExtractionError

YOUTUBE_URL_PATTERNS = (
    re.compile(r"^https?://(www\.)?youtube\.com/watch"),
    re.compile(r"^https?://youtu\.be/"),
)
# Order matters: the v= parameter wins over the youtu.be path segment.
VIDEO_ID_PATTERNS = (
    re.compile(r"v=([^&]+)"),
    re.compile(r"youtu\.be/([^?]+)"),
)


def is_youtube_url(url: str) -> bool:
    return any(pattern.match(url) for pattern in YOUTUBE_URL_PATTERNS)


def extract_youtube_id(url: str) -> str:
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    raise ExtractionError(f"Could not extract video ID from URL: {url}")

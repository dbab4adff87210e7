import logging
import re
from collections.abc import Mapping
from functools import partial

from newsboat_summarize.adapters.tools import augmented_path, first_success, run_tool
from newsboat_summarize.types import (
    ExtractionError,
    ToolNotFoundError,
    ToolResult,
    ToolStatus,
)

TAG_PATTERN = re.compile(r"<[^>]*>")
INSTALL_HINT = (
    "Install lynx (preferred) or curl, e.g. brew install lynx or sudo apt install lynx"
)


def strip_tags(html: str) -> str:
    text = TAG_PATTERN.sub("", html)
    return "\n".join(line for line in text.splitlines() if line.strip())


def dump_with_lynx(url: str, path: str | None = None) -> ToolResult:
    return run_tool(["lynx", "-dump", "-nolist", url], path=path)


def fetch_with_curl(url: str, path: str | None = None) -> ToolResult:
    result = run_tool(["curl", "-fsSL", url], path=path)
    if result.status is not ToolStatus.SUCCESS:
        return result
    return ToolResult.success(result.tool, strip_tags(result.content))


ARTICLE_PROVIDERS = (dump_with_lynx, fetch_with_curl)


def fetch_article_text(url: str, environ: Mapping[str, str] | None = None) -> str:
    path = augmented_path((), environ)
    logging.info("Article: start %s", url)
    result = first_success(
        partial(provider, url, path) for provider in ARTICLE_PROVIDERS
    )

    if result.status is ToolStatus.NOT_FOUND:
        raise ToolNotFoundError(f"Neither lynx nor curl found. {INSTALL_HINT}")
    if result.status is ToolStatus.FAILED:
        raise ExtractionError(
            f"Failed to extract article with {result.tool}: {result.reason}"
        )

    logging.info("Content source selected: %s", result.tool)
    return result.content

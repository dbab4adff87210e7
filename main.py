from newsboat_summarize.adapters.article import fetch_article_text, strip_tags
from newsboat_summarize.adapters.browser import (
    PROVIDER_URLS,
    default_browser_command,
    launch_browser,
    resolve_provider_url,
)
from newsboat_summarize.adapters.clipboard import copy_to_clipboard
from newsboat_summarize.adapters.youtube import fetch_youtube_transcript
from newsboat_summarize.app import extract_content, run
from newsboat_summarize.cli import main, parse_args
from newsboat_summarize.config import load_config
from newsboat_summarize.core.prompting import (
    DEFAULT_PROMPT,
    build_prompt,
    select_prompt,
)
from newsboat_summarize.core.url_classify import extract_youtube_id, is_youtube_url
from newsboat_summarize.installer import install, uninstall

__all__ = [
    "DEFAULT_PROMPT",
    "PROVIDER_URLS",
    "build_prompt",
    "copy_to_clipboard",
    "default_browser_command",
    "extract_content",
    "extract_youtube_id",
    "fetch_article_text",
    "fetch_youtube_transcript",
    "install",
    "is_youtube_url",
    "launch_browser",
    "load_config",
    "main",
    "parse_args",
    "resolve_provider_url",
    "run",
    "select_prompt",
    "strip_tags",
    "uninstall",
]


if __name__ == "__main__":
    raise SystemExit(main())

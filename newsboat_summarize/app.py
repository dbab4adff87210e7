import logging
from collections.abc import Callable

from newsboat_summarize.adapters.article import fetch_article_text
from newsboat_summarize.adapters.browser import launch_browser, resolve_provider_url
from newsboat_summarize.adapters.clipboard import copy_to_clipboard
from newsboat_summarize.adapters.youtube import fetch_youtube_transcript
from newsboat_summarize.core.prompting import build_prompt, select_prompt
from newsboat_summarize.core.url_classify import extract_youtube_id, is_youtube_url
from newsboat_summarize.types import EmptyContentError, RunReport, RuntimeConfig


def extract_content(
    url: str,
    article_fetcher: Callable[[str], str],
    youtube_fetcher: Callable[[str], str],
) -> tuple[str, str]:
    if is_youtube_url(url):
        video_id = extract_youtube_id(url)
        logging.info("Type: YouTube (%s)", video_id)
        return "youtube", youtube_fetcher(video_id)

    logging.info("Type: article")
    return "article", article_fetcher(url)


def run(
    url: str,
    config: RuntimeConfig,
    article_fetcher: Callable[[str], str] | None = None,
    youtube_fetcher: Callable[[str], str] | None = None,
    clipboard: Callable[[str], bool] | None = None,
    launcher: Callable[[str, str], None] | None = None,
) -> RunReport:
    article_fetcher = article_fetcher or fetch_article_text
    youtube_fetcher = youtube_fetcher or fetch_youtube_transcript
    clipboard = clipboard or copy_to_clipboard
    launcher = launcher or launch_browser

    logging.info("Start: %s", url)
    kind, content = extract_content(
        url, article_fetcher=article_fetcher, youtube_fetcher=youtube_fetcher
    )
    if not content.strip():
        raise EmptyContentError(f"No content extracted from {url}")
    logging.info("Extracted %d characters", len(content))

    message = build_prompt(select_prompt(config.custom_prompt), content)
    copied = clipboard(message)

    chat_url = resolve_provider_url(config.provider)
    launcher(chat_url, config.browser_cmd)
    return RunReport(
        kind=kind,
        provider=config.provider,
        chat_url=chat_url,
        copied=copied,
        characters=len(message),
    )

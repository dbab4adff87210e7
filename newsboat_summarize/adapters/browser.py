import logging
import shlex
import sys
from subprocess import CalledProcessError, run as run_process

from newsboat_summarize.types import ConfigError, LaunchError

PROVIDER_URLS = {
    "claude": "https://claude.ai/chat",
    "chatgpt": "https://chat.openai.com/",
    "grok": "https://x.ai/grok",
}


def resolve_provider_url(provider: str) -> str:
    try:
        return PROVIDER_URLS[provider]
    except KeyError as exc:
        choices = ", ".join(PROVIDER_URLS)
        raise ConfigError(
            f"Unknown provider: {provider!r} (expected one of: {choices})"
        ) from exc


def default_browser_command(platform: str = sys.platform) -> str:
    if platform == "darwin":
        return "open"
    return "xdg-open"


def launch_browser(url: str, command: str) -> None:
    try:
        argv = shlex.split(command)
    except ValueError as exc:
        raise LaunchError(f"Invalid browser command {command!r}: {exc}") from exc
    if not argv:
        raise LaunchError("Browser command is empty.")

    logging.info("Opening %s with %s", url, argv[0])
    try:
        run_process([*argv, url], check=True)
    except (CalledProcessError, OSError) as exc:
        raise LaunchError(f"Failed to open browser: {exc}") from exc

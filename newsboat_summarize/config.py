import logging
import os
import shlex
import sys
from collections.abc import Mapping
from pathlib import Path

from newsboat_summarize.adapters.browser import default_browser_command
from newsboat_summarize.types import ConfigError, RuntimeConfig

CONFIG_NAME = "summarize.conf"
CONFIG_ENV_VAR = "NEWSBOAT_SUMMARIZE_CONFIG"
CONFIG_KEYS = {"PROVIDER", "BROWSER_CMD", "CUSTOM_PROMPT"}
DEFAULT_PROVIDER = "claude"

DEFAULT_CONFIG_TEMPLATE = """\
# newsboat-summarize configuration

# AI chat provider: claude, chatgpt or grok
PROVIDER="claude"

# Command that opens the chat page (macOS: open, Linux: xdg-open)
BROWSER_CMD="open"

# Replaces the built-in summarization prompt when set
# CUSTOM_PROMPT="Summarize this in three sentences and list open questions."
"""


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".newsboat" / CONFIG_NAME


def parse_config_text(text: str) -> dict[str, str]:
    # Shell assignments are parsed, never sourced; quoted values may span lines.
    try:
        tokens = shlex.split(text, comments=True)
    except ValueError as exc:
        raise ConfigError(f"Invalid configuration syntax: {exc}") from exc

    values: dict[str, str] = {}
    for token in tokens:
        if "=" not in token:
            continue
        key, value = token.split("=", 1)
        if key in CONFIG_KEYS:
            values[key] = value
    return values


def load_config(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    platform: str = sys.platform,
) -> RuntimeConfig:
    path = path or default_config_path(environ)
    defaults = RuntimeConfig(
        provider=DEFAULT_PROVIDER, browser_cmd=default_browser_command(platform)
    )
    if not path.exists():
        logging.warning("WARNING: Config file not found: %s, using defaults", path)
        return defaults

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc

    values = parse_config_text(text)
    return RuntimeConfig(
        provider=values.get("PROVIDER") or defaults.provider,
        browser_cmd=values.get("BROWSER_CMD") or defaults.browser_cmd,
        custom_prompt=values.get("CUSTOM_PROMPT") or None,
        source=path,
    )

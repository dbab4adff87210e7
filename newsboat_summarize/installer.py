import argparse
import logging
import re
import shlex
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from newsboat_summarize.adapters.browser import default_browser_command
from newsboat_summarize.adapters.tools import augmented_path
from newsboat_summarize.adapters.youtube import (
    INSTALL_HINT,
    TRANSCRIPT_TOOL,
    candidate_tool_dirs,
)
from newsboat_summarize.cli import configure_logging
from newsboat_summarize.config import CONFIG_NAME, DEFAULT_CONFIG_TEMPLATE
from newsboat_summarize.types import InstallError, SummarizeError

SCRIPT_NAME = "newsboat-summarize"
MACRO_KEY = "m"
BROWSER_LINE = re.compile(r"^browser\b\s*(.*)$")
TEMP_FILES = (Path("/tmp/newsboat-debug.log"), Path("/tmp/macro-test-z"))


@dataclass(frozen=True)
class InstallPaths:
    newsboat_dir: Path
    newsboat_config: Path

    @classmethod
    def from_home(cls, home: Path) -> "InstallPaths":
        return cls(
            newsboat_dir=home / ".newsboat",
            newsboat_config=home / ".config" / "newsboat" / "config",
        )

    @property
    def script(self) -> Path:
        return self.newsboat_dir / SCRIPT_NAME

    @property
    def config(self) -> Path:
        return self.newsboat_dir / CONFIG_NAME


def _read_lines(path: Path) -> list[str]:
    if not path.is_file():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def _write_lines(path: Path, lines: list[str]) -> None:
    tmp = path.with_name(f"{path.name}.tmp")
    try:
        tmp.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        tmp.replace(path)
    except OSError as exc:
        raise InstallError(f"Could not write {path}: {exc}") from exc


def check_dependencies(home: Path | None = None) -> list[str]:
    warnings: list[str] = []
    if shutil.which("lynx") is None and shutil.which("curl") is None:
        warnings.append(
            "Neither curl nor lynx found. Install one for article content extraction."
        )
    path = augmented_path(candidate_tool_dirs(home))
    if shutil.which(TRANSCRIPT_TOOL, path=path) is None:
        warnings.append(f"{TRANSCRIPT_TOOL} not found. {INSTALL_HINT}")
    for warning in warnings:
        logging.warning("WARNING: %s", warning)
    return warnings


def backup_newsboat_config(
    paths: InstallPaths, now: datetime | None = None
) -> Path | None:
    if not paths.newsboat_config.is_file():
        return None
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    backup = paths.newsboat_config.with_name(
        f"{paths.newsboat_config.name}.backup.{stamp}"
    )
    try:
        shutil.copy2(paths.newsboat_config, backup)
    except OSError as exc:
        raise InstallError(
            f"Could not back up {paths.newsboat_config}: {exc}"
        ) from exc
    logging.info("Backing up newsboat config to: %s", backup)
    return backup


def launcher_script(python: str) -> str:
    return f'#!/bin/sh\nexec {shlex.quote(python)} -m newsboat_summarize.cli "$@"\n'


def install_files(paths: InstallPaths, python: str) -> None:
    try:
        paths.script.write_text(launcher_script(python), encoding="utf-8")
        paths.script.chmod(0o755)
        logging.info("Installed: %s", paths.script)
        if paths.config.exists():
            logging.info("Config file already exists, skipping: %s", paths.config)
        else:
            paths.config.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
            logging.info("Installed: %s", paths.config)
    except OSError as exc:
        raise InstallError(f"Could not install files: {exc}") from exc


def find_browser_setting(lines: list[str]) -> str | None:
    for line in lines:
        match = BROWSER_LINE.match(line)
        if match and SCRIPT_NAME not in line:
            return match.group(1).strip()
    return None


def add_macro(paths: InstallPaths, platform: str = sys.platform) -> str:
    lines = _read_lines(paths.newsboat_config)
    browser = find_browser_setting(lines)
    if browser is None:
        browser = default_browser_command(platform)
        logging.info("Using default browser setting: %s", browser)
        lines.append(f"browser {browser}")
    else:
        logging.info("Found existing browser setting: %s", browser)

    kept = [line for line in lines if SCRIPT_NAME not in line]
    if len(kept) != len(lines):
        logging.info("Removing existing summarization macro")
    macro = (
        f'macro {MACRO_KEY} set browser "{paths.script}" ; '
        f"open-in-browser ; set browser {browser}"
    )
    kept.append(macro)
    _write_lines(paths.newsboat_config, kept)
    logging.info("Added macro: %s", macro)
    return macro


def adapt_config_for_platform(
    paths: InstallPaths, platform: str = sys.platform
) -> None:
    if not platform.startswith("linux") or not paths.config.is_file():
        return
    text = paths.config.read_text(encoding="utf-8")
    updated = text.replace('BROWSER_CMD="open"', 'BROWSER_CMD="xdg-open"')
    if updated != text:
        paths.config.write_text(updated, encoding="utf-8")
        logging.info("Updated browser command for Linux")


def install(
    paths: InstallPaths,
    platform: str = sys.platform,
    python: str = sys.executable,
) -> None:
    logging.info("Starting newsboat-summarize installation...")
    check_dependencies(paths.newsboat_dir.parent)
    for directory in (paths.newsboat_dir, paths.newsboat_config.parent):
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InstallError(f"Could not create {directory}: {exc}") from exc
    backup_newsboat_config(paths)
    install_files(paths, python)
    add_macro(paths, platform)
    adapt_config_for_platform(paths, platform)
    logging.info("Installation completed successfully!")
    logging.info(
        "Usage: in newsboat select an article or YouTube video and press ',%s'.",
        MACRO_KEY,
    )
    logging.info("Edit %s to change the provider, prompt or browser.", paths.config)


def remove_macro(paths: InstallPaths) -> bool:
    if not paths.newsboat_config.is_file():
        logging.info("Newsboat config file not found: %s", paths.newsboat_config)
        return False
    lines = _read_lines(paths.newsboat_config)
    kept = [line for line in lines if SCRIPT_NAME not in line]
    if len(kept) == len(lines):
        logging.info("No summarization macro found in config")
        return False
    _write_lines(paths.newsboat_config, kept)
    logging.info("Summarization macro removed")
    return True


def remove_files(paths: InstallPaths, extra: tuple[Path, ...] | None = None) -> int:
    extra = TEMP_FILES if extra is None else extra
    removed = 0
    for path in (paths.script, paths.config, *extra):
        if path.is_file():
            logging.info("Removing: %s", path)
            try:
                path.unlink()
            except OSError as exc:
                raise InstallError(f"Could not remove {path}: {exc}") from exc
            removed += 1
    if not removed:
        logging.info("No installed files found to remove")
    return removed


def uninstall(
    paths: InstallPaths,
    confirm: Callable[[str], str] = input,
    extra: tuple[Path, ...] | None = None,
) -> int:
    response = confirm(
        "This will remove the newsboat summarization integration. Continue? [y/N]: "
    )
    if response.strip().lower() not in {"y", "yes"}:
        logging.info("Uninstallation cancelled")
        return 0

    backup_newsboat_config(paths)
    remove_macro(paths)
    removed = remove_files(paths, extra=extra)
    if "browser open" in _read_lines(paths.newsboat_config):
        logging.warning(
            "WARNING: Found simplified browser setting 'browser open', "
            "you may want to restore your original browser configuration"
        )
    logging.info("Uninstallation completed, removed %d file(s)", removed)
    return removed


def _build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--home",
        type=Path,
        default=Path.home(),
        help="Home directory holding .newsboat and .config/newsboat.",
    )
    return parser


def install_main() -> int:
    configure_logging()
    args = _build_parser("Install the newsboat summarize macro.").parse_args(
        sys.argv[1:]
    )
    try:
        install(InstallPaths.from_home(args.home))
    except SummarizeError as exc:
        logging.error("ERROR: %s", exc)
        return 1
    return 0


def uninstall_main() -> int:
    configure_logging()
    parser = _build_parser("Remove the newsboat summarize macro.")
    parser.add_argument(
        "--yes", action="store_true", help="Do not ask for confirmation."
    )
    args = parser.parse_args(sys.argv[1:])
    confirm = (lambda prompt: "y") if args.yes else input
    try:
        uninstall(InstallPaths.from_home(args.home), confirm=confirm)
    except SummarizeError as exc:
        logging.error("ERROR: %s", exc)
        return 1
    return 0

import logging
import sysconfig
from collections.abc import Mapping
from pathlib import Path

from newsboat_summarize.adapters.tools import augmented_path, run_tool
from newsboat_summarize.types import ExtractionError, ToolNotFoundError, ToolStatus

TRANSCRIPT_TOOL = "youtube_transcript_api"
INSTALL_HINT = "Install it with: python3 -m pip install --user youtube-transcript-api"
NO_TRANSCRIPT_MARKER = "Could not retrieve a transcript"


def _python_version_key(bin_dir: Path) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in bin_dir.parent.name.split("."))
    except ValueError:
        return ()


def candidate_tool_dirs(home: Path | None = None) -> list[Path]:
    home = home or Path.home()
    # pip install --user lands here on macOS, one directory per Python version.
    python_dirs = sorted(
        (home / "Library" / "Python").glob("*/bin"),
        key=_python_version_key,
        reverse=True,
    )
    return [
        # Scripts of the running interpreter: a venv or pipx install of
        # youtube-transcript-api puts the CLI next to it.
        Path(sysconfig.get_path("scripts")),
        home / ".local" / "bin",
        *python_dirs,
        Path("/opt/homebrew/bin"),
        Path("/usr/local/bin"),
    ]


def fetch_youtube_transcript(
    video_id: str,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> str:
    path = augmented_path(candidate_tool_dirs(home), environ)
    logging.info("Transcript: start %s", video_id)
    # IDs may start with "-"; the CLI strips a leading backslash escape.
    cli_id = f"\\{video_id}" if video_id.startswith("-") else video_id
    result = run_tool([TRANSCRIPT_TOOL, cli_id, "--format", "text"], path=path)

    if result.status is ToolStatus.NOT_FOUND:
        raise ToolNotFoundError(f"{TRANSCRIPT_TOOL} not found. {INSTALL_HINT}")
    if result.status is ToolStatus.FAILED:
        raise ExtractionError(f"Failed to fetch YouTube transcript: {result.reason}")

    # The CLI reports unavailable transcripts on stdout and still exits with 0.
    if NO_TRANSCRIPT_MARKER in result.content:
        reason = next(
            line.strip()
            for line in result.content.splitlines()
            if NO_TRANSCRIPT_MARKER in line
        )
        raise ExtractionError(f"Failed to fetch YouTube transcript: {reason}")
    logging.info("Transcript: success (%d)", len(result.content))
    return result.content

import logging
import os
import shutil
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from subprocess import DEVNULL, PIPE, run as run_process

from newsboat_summarize.types import ToolResult, ToolStatus


def augmented_path(
    candidate_dirs: Iterable[Path], environ: Mapping[str, str] | None = None
) -> str:
    env = os.environ if environ is None else environ
    entries = [entry for entry in env.get("PATH", "").split(os.pathsep) if entry]
    for directory in candidate_dirs:
        if str(directory) in entries or not directory.is_dir():
            continue
        logging.info("Adding to search path: %s", directory)
        entries.append(str(directory))
    return os.pathsep.join(entries)


def run_tool(
    argv: list[str],
    input_text: str | None = None,
    path: str | None = None,
    capture: bool = True,
) -> ToolResult:
    tool = argv[0]
    executable = shutil.which(tool, path=path)
    if executable is None:
        return ToolResult.not_found(tool)

    env = None if path is None else {**os.environ, "PATH": path}
    # Clipboard utilities like xclip fork and keep inherited pipes open,
    # so output is only captured when the caller needs it.
    stream = PIPE if capture else DEVNULL
    try:
        completed = run_process(
            [executable, *argv[1:]],
            input=input_text,
            stdout=stream,
            stderr=stream,
            text=True,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except OSError as exc:
        return ToolResult.failed(tool, str(exc))

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        return ToolResult.failed(tool, stderr or f"exit code {completed.returncode}")
    return ToolResult.success(tool, completed.stdout or "")


def first_success(providers: Iterable[Callable[[], ToolResult]]) -> ToolResult:
    for provider in providers:
        result = provider()
        if result.status is ToolStatus.NOT_FOUND:
            logging.info("%s: not found", result.tool)
            continue
        return result
    return ToolResult.not_found()

import logging
from collections.abc import Mapping
from functools import partial

from newsboat_summarize.adapters.tools import augmented_path, first_success, run_tool
from newsboat_summarize.types import ToolStatus

CLIPBOARD_COMMANDS = (
    ["pbcopy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)


def copy_to_clipboard(text: str, environ: Mapping[str, str] | None = None) -> bool:
    path = augmented_path((), environ)
    result = first_success(
        partial(run_tool, argv, input_text=text, path=path, capture=False)
        for argv in CLIPBOARD_COMMANDS
    )
    if result.status is ToolStatus.SUCCESS:
        logging.info("Copied to clipboard with %s", result.tool)
        return True

    if result.status is ToolStatus.NOT_FOUND:
        logging.warning(
            "WARNING: No clipboard utility found (pbcopy, xclip, xsel); "
            "content was not copied."
        )
    else:
        logging.warning(
            "WARNING: Clipboard copy with %s failed: %s", result.tool, result.reason
        )
    return False

import argparse
import logging
import sys
from typing import NoReturn

from newsboat_summarize.app import run
from newsboat_summarize.config import load_config
from newsboat_summarize.types import RunReport, SummarizeError, UsageError

LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.format_usage().strip()} ({message})")


def configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = ArgumentParser(
        prog="newsboat-summarize",
        description="Copy an article or YouTube transcript with a summary prompt "
        "to the clipboard and open an AI chat.",
    )
    parser.add_argument("url", help="Article or YouTube URL passed in by newsboat.")
    return parser.parse_args(argv)


def format_summary(report: RunReport) -> str:
    if report.copied:
        return (
            f"Done: {report.kind} content ({report.characters} characters) copied "
            f"to clipboard, {report.provider} opened at {report.chat_url}. "
            "Paste it with Cmd+V (macOS) or Ctrl+V (Linux)."
        )
    return (
        f"Done: {report.provider} opened at {report.chat_url}, "
        "but the content could not be copied to the clipboard."
    )


def main() -> int:
    configure_logging()
    try:
        args = parse_args(sys.argv[1:])
        config = load_config()
        report = run(args.url, config)
    except SummarizeError as exc:
        logging.error("ERROR: %s", exc)
        return 1

    print(format_summary(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

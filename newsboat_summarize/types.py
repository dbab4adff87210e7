from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SummarizeError(RuntimeError):
    pass


class UsageError(SummarizeError):
    pass


class ExtractionError(SummarizeError):
    pass


class ToolNotFoundError(SummarizeError):
    pass


class EmptyContentError(SummarizeError):
    pass


class ConfigError(SummarizeError):
    pass


class LaunchError(SummarizeError):
    pass


class InstallError(SummarizeError):
    pass


class ToolStatus(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class ToolResult:
    status: ToolStatus
    tool: str = ""
    content: str = ""
    reason: str = ""

    @classmethod
    def success(cls, tool: str, content: str) -> "ToolResult":
        return cls(ToolStatus.SUCCESS, tool=tool, content=content)

    @classmethod
    def not_found(cls, tool: str = "") -> "ToolResult":
        return cls(ToolStatus.NOT_FOUND, tool=tool)

    @classmethod
    def failed(cls, tool: str, reason: str) -> "ToolResult":
        return cls(ToolStatus.FAILED, tool=tool, reason=reason)


@dataclass(frozen=True)
class RuntimeConfig:
    provider: str
    browser_cmd: str
    custom_prompt: str | None = None
    source: Path | None = field(default=None, compare=False)


@dataclass
class RunReport:
    kind: str
    provider: str
    chat_url: str
    copied: bool
    characters: int

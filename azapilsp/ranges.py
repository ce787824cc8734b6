"""Source positions, ranges and diagnostics, and their LSP wire forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Iterable

MARKDOWN = "markdown"
PLAIN_TEXT = "plaintext"

PROPERTY_COMPLETION = 10
VALUE_COMPLETION = 12
SNIPPET_COMPLETION = 15

PLAIN_TEXT_FORMAT = 1
SNIPPET_FORMAT = 2

ADJUST_INDENTATION = 2


@dataclass(frozen=True)
class Pos:
    """A 1-based line/column position in a source file, with a 0-based byte offset."""

    line: int = 1
    column: int = 1
    byte: int = 0


@dataclass(frozen=True)
class HclRange:
    """A span of source text between two positions."""

    filename: str = ""
    start: Pos = field(default_factory=Pos)
    end: Pos = field(default_factory=Pos)


@dataclass(frozen=True)
class Position:
    """A 0-based LSP position."""

    line: int = 0
    character: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
    """A 0-based LSP range."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


class HclSeverity(Enum):
    INVALID = "invalid"
    ERROR = "error"
    WARNING = "warning"


class DiagnosticSeverity(IntEnum):
    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


@dataclass
class HclDiagnostic:
    """A diagnostic produced while reading configuration."""

    severity: HclSeverity = HclSeverity.INVALID
    summary: str = ""
    detail: str = ""
    subject: HclRange | None = None


@dataclass
class Diagnostic:
    """A diagnostic in LSP form."""

    range: Range
    severity: DiagnosticSeverity
    source: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": self.range.to_dict(),
            "severity": int(self.severity),
            "source": self.source,
            "message": self.message,
        }


@dataclass
class MarkupContent:
    kind: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "value": self.value}


@dataclass
class TextEdit:
    range: Range
    new_text: str

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "newText": self.new_text}


@dataclass
class Command:
    title: str
    command: str
    arguments: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"title": self.title, "command": self.command}
        if self.arguments:
            result["arguments"] = list(self.arguments)
        return result


@dataclass
class CompletionItem:
    """A completion candidate offered to the client."""

    label: str
    kind: int = 0
    detail: str = ""
    documentation: MarkupContent | None = None
    sort_text: str = ""
    insert_text_format: int = 0
    insert_text_mode: int = 0
    text_edit: TextEdit | None = None
    command: Command | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"label": self.label}
        if self.kind:
            result["kind"] = self.kind
        if self.detail:
            result["detail"] = self.detail
        if self.documentation is not None:
            result["documentation"] = self.documentation.to_dict()
        if self.sort_text:
            result["sortText"] = self.sort_text
        if self.insert_text_format:
            result["insertTextFormat"] = self.insert_text_format
        if self.insert_text_mode:
            result["insertTextMode"] = self.insert_text_mode
        if self.text_edit is not None:
            result["textEdit"] = self.text_edit.to_dict()
        if self.command is not None:
            result["command"] = self.command.to_dict()
        return result


def hcl_pos_to_lsp(pos: Pos) -> Position:
    """Convert a 1-based source position to a 0-based LSP position."""
    return Position(line=pos.line - 1, character=pos.column - 1)


def hcl_range_to_lsp(rng: HclRange) -> Range:
    return Range(start=hcl_pos_to_lsp(rng.start), end=hcl_pos_to_lsp(rng.end))


def hcl_severity_to_lsp(severity: HclSeverity) -> DiagnosticSeverity:
    """Map a source severity to an LSP severity; invalid severities raise ValueError."""
    if severity is HclSeverity.ERROR:
        return DiagnosticSeverity.ERROR
    if severity is HclSeverity.WARNING:
        return DiagnosticSeverity.WARNING
    raise ValueError("invalid diagnostic")


def hcl_diags_to_lsp(hcl_diags: Iterable[HclDiagnostic] | None, source: str) -> list[Diagnostic]:
    """Convert source diagnostics to LSP diagnostics; never returns None."""
    result: list[Diagnostic] = []
    for diag in hcl_diags or ():
        message = diag.summary
        if diag.detail:
            message += ": " + diag.detail
        rng = hcl_range_to_lsp(diag.subject) if diag.subject is not None else Range()
        result.append(
            Diagnostic(
                range=rng,
                severity=hcl_severity_to_lsp(diag.severity),
                source=source,
                message=message,
            )
        )
    return result
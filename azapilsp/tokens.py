"""Semantic token legends and the encoder producing LSP token data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence

from azapilsp.ranges import HclRange


class TokenType(str, Enum):
    CLASS = "class"
    COMMENT = "comment"
    ENUM = "enum"
    ENUM_MEMBER = "enumMember"
    EVENT = "event"
    FUNCTION = "function"
    INTERFACE = "interface"
    KEYWORD = "keyword"
    MACRO = "macro"
    METHOD = "method"
    MODIFIER = "modifier"
    NAMESPACE = "namespace"
    NUMBER = "number"
    OPERATOR = "operator"
    PARAMETER = "parameter"
    PROPERTY = "property"
    REGEXP = "regexp"
    STRING = "string"
    STRUCT = "struct"
    TYPE = "type"
    TYPE_PARAMETER = "typeParameter"
    VARIABLE = "variable"


class TokenModifier(str, Enum):
    DECLARATION = "declaration"
    DEFINITION = "definition"
    READONLY = "readonly"
    STATIC = "static"
    DEPRECATED = "deprecated"
    ABSTRACT = "abstract"
    ASYNC = "async"
    MODIFICATION = "modification"
    DOCUMENTATION = "documentation"
    DEFAULT_LIBRARY = "defaultLibrary"


class SemanticTokenType(str, Enum):
    """Token kinds found in configuration source."""

    BLOCK_TYPE = "hcl-blockType"
    BLOCK_LABEL = "hcl-blockLabel"
    ATTR_NAME = "hcl-attrName"
    BOOL = "hcl-bool"
    NUMBER = "hcl-number"
    STRING = "hcl-string"
    OBJECT_KEY = "hcl-objectKey"
    MAP_KEY = "hcl-mapKey"
    KEYWORD = "hcl-keyword"
    TRAVERSAL_STEP = "hcl-traversalStep"


class SemanticTokenModifier(str, Enum):
    DEPENDENT = "hcl-dependent"
    DEPRECATED = "hcl-deprecated"


@dataclass(frozen=True)
class SemanticToken:
    type: SemanticTokenType
    range: HclRange
    modifiers: tuple[SemanticTokenModifier, ...] = ()


SERVER_TOKEN_TYPES: tuple[TokenType, ...] = (
    TokenType.TYPE,
    TokenType.STRING,
    TokenType.PROPERTY,
    TokenType.KEYWORD,
    TokenType.NUMBER,
    TokenType.PARAMETER,
    TokenType.VARIABLE,
)

SERVER_TOKEN_MODIFIERS: tuple[TokenModifier, ...] = (
    TokenModifier.DEPRECATED,
    TokenModifier.MODIFICATION,
)

_TYPE_MAP = {
    SemanticTokenType.BLOCK_TYPE: TokenType.TYPE,
    SemanticTokenType.BLOCK_LABEL: TokenType.STRING,
    SemanticTokenType.ATTR_NAME: TokenType.PROPERTY,
    SemanticTokenType.BOOL: TokenType.KEYWORD,
    SemanticTokenType.NUMBER: TokenType.NUMBER,
    SemanticTokenType.STRING: TokenType.STRING,
    SemanticTokenType.OBJECT_KEY: TokenType.PARAMETER,
    SemanticTokenType.MAP_KEY: TokenType.PARAMETER,
    SemanticTokenType.KEYWORD: TokenType.VARIABLE,
    SemanticTokenType.TRAVERSAL_STEP: TokenType.VARIABLE,
}

_MODIFIER_MAP = {
    SemanticTokenModifier.DEPENDENT: TokenModifier.MODIFICATION,
    SemanticTokenModifier.DEPRECATED: TokenModifier.DEPRECATED,
}

_UINT32 = 0xFFFFFFFF


def token_types_legend(client_supported: Iterable[str]) -> list[TokenType]:
    """Server token types that the client also supports, in server order."""
    supported = set(client_supported)
    return [t for t in SERVER_TOKEN_TYPES if t.value in supported]


def token_modifiers_legend(client_supported: Iterable[str]) -> list[TokenModifier]:
    """Server token modifiers that the client also supports, in server order."""
    supported = set(client_supported)
    return [m for m in SERVER_TOKEN_MODIFIERS if m.value in supported]


def type_index(legend: Sequence[TokenType], token_type: TokenType) -> int:
    """Position of a token type in a legend, or -1."""
    try:
        return list(legend).index(token_type)
    except ValueError:
        return -1


def modifier_bit_mask(legend: Sequence[TokenModifier], declared: Iterable[TokenModifier]) -> int:
    """Bit mask with bit i set for each legend entry i present in declared."""
    declared_set = set(declared)
    return sum(1 << i for i, modifier in enumerate(legend) if modifier in declared_set)


def full_request_supported(full: Any) -> bool:
    """Whether the client's `requests.full` capability allows full-document requests."""
    if isinstance(full, bool):
        return full
    return isinstance(full, dict)


def _line_bytes(line: str | bytes) -> bytes:
    return line.encode("utf-8") if isinstance(line, str) else line


@dataclass
class TokenEncoder:
    """Encodes semantic tokens into the relative five-integer LSP format."""

    lines: Sequence[str | bytes]
    tokens: Sequence[SemanticToken]
    client_token_types: Sequence[str] = field(default_factory=list)
    client_token_modifiers: Sequence[str] = field(default_factory=list)

    def encode(self) -> list[int]:
        data: list[int] = []
        previous: SemanticToken | None = None
        for token in self.tokens:
            data.extend(self._encode_token(token, previous))
            previous = token
        return data

    def _encode_token(self, token: SemanticToken, previous: SemanticToken | None) -> list[int]:
        token_type = _TYPE_MAP.get(token.type)
        if token_type is None or token_type.value not in self.client_token_types:
            return []

        type_idx = type_index(token_types_legend(self.client_token_types), token_type)

        modifiers = [
            mapped
            for mapped in (_MODIFIER_MAP.get(m) for m in token.modifiers)
            if mapped is not None and mapped.value in self.client_token_modifiers
        ]
        mask = modifier_bit_mask(token_modifiers_legend(self.client_token_modifiers), modifiers)

        start, end = token.range.start, token.range.end
        previous_line = 0
        previous_start_char = 0
        if previous is not None:
            previous_line = previous.range.end.line - 1
            if end.line - 1 == previous_line:
                previous_start_char = previous.range.start.column - 1

        # Multiline tokens are split into one entry per line, since the
        # client is assumed not to support them.
        entries: list[tuple[int, int, int]] = []
        if end.line == start.line:
            entries.append(
                (
                    start.line - 1 - previous_line,
                    start.column - 1 - previous_start_char,
                    end.byte - start.byte,
                )
            )
        else:
            for line in range(start.line - 1, end.line):
                delta_start = start.column - 1 - previous_start_char if line == start.line - 1 else 0
                if line == end.line - 1:
                    length = end.column - 1
                else:
                    length = len(_line_bytes(self.lines[line]).rstrip(b"\n\r"))
                entries.append((line - previous_line, delta_start, length))
                previous_line = line

        return [
            value & _UINT32
            for delta_line, delta_start, length in entries
            for value in (delta_line, delta_start, length, type_idx, mask)
        ]
import pytest

from azapilsp.ranges import HclRange, Pos
from azapilsp.tokens import (
    SERVER_TOKEN_MODIFIERS,
    SERVER_TOKEN_TYPES,
    SemanticToken,
    SemanticTokenModifier,
    SemanticTokenType,
    TokenEncoder,
    TokenModifier,
    TokenType,
    full_request_supported,
    modifier_bit_mask,
    token_modifiers_legend,
    token_types_legend,
    type_index,
)

BLOCK_SOURCE = "\n".join(
    [
        'myblock "mytype" {',
        '  str_attr = "something"',
        "  num_attr = 42",
        "  bool_attr = true",
        "}",
    ]
)

SERVER_TYPES = [t.value for t in SERVER_TOKEN_TYPES]
SERVER_MODIFIERS = [m.value for m in SERVER_TOKEN_MODIFIERS]

BT = SemanticTokenType.BLOCK_TYPE
BL = SemanticTokenType.BLOCK_LABEL
AN = SemanticTokenType.ATTR_NAME
DEP = SemanticTokenModifier.DEPRECATED
DEPENDENT = SemanticTokenModifier.DEPENDENT


def _rng(start, end, filename="test.tf"):
    return HclRange(filename, Pos(*start), Pos(*end))


def _encoder(source, tokens, types=SERVER_TYPES, modifiers=SERVER_MODIFIERS):
    return TokenEncoder(
        lines=source.splitlines(keepends=True),
        tokens=tokens,
        client_token_types=types,
        client_token_modifiers=modifiers,
    )


def _rows(data):
    """Group the flat encoded data into five-number entries."""
    return [tuple(data[i:i + 5]) for i in range(0, len(data), 5)]


def _five_tokens(label_mods=(), attr_mods=((), (), ())):
    spans = [
        (BT, (1, 1, 0), (1, 8, 7), ()),
        (BL, (1, 9, 8), (1, 8, 16), label_mods),
        (AN, (2, 3, 21), (2, 11, 29), attr_mods[0]),
        (AN, (3, 3, 46), (3, 11, 54), attr_mods[1]),
        (AN, (4, 3, 62), (4, 12, 71), attr_mods[2]),
    ]
    return [SemanticToken(kind, _rng(start, end), mods) for kind, start, end, mods in spans]


def test_single_line_tokens():
    data = _encoder(BLOCK_SOURCE, _five_tokens()).encode()
    assert _rows(data) == [
        (0, 0, 7, 0, 0),
        (0, 8, 8, 1, 0),
        (1, 2, 8, 2, 0),
        (1, 2, 8, 2, 0),
        (1, 2, 9, 2, 0),
    ]


def test_multi_line_tokens():
    tokens = [SemanticToken(AN, _rng((2, 3, 21), (4, 12, 71)))]
    data = _encoder(BLOCK_SOURCE, tokens).encode()
    assert _rows(data) == [
        (1, 2, 24, 2, 0),
        (1, 0, 15, 2, 0),
        (1, 0, 11, 2, 0),
    ]


def test_delta_start_char_bug():
    source = 'resource "aws_iam_role_policy" "firehose_s3_access" {\n}\n'
    tokens = [
        SemanticToken(BT, _rng((1, 1, 0), (1, 9, 8), "main.tf")),
        SemanticToken(BL, _rng((1, 10, 9), (1, 31, 30), "main.tf"), (DEPENDENT,)),
        SemanticToken(BL, _rng((1, 32, 31), (1, 52, 51), "main.tf")),
    ]
    data = _encoder(source, tokens).encode()
    assert _rows(data) == [
        (0, 0, 8, 0, 0),
        (0, 9, 21, 1, 2),
        (0, 22, 20, 1, 0),
    ]


def test_token_modifiers():
    tokens = _five_tokens(
        label_mods=(DEP,), attr_mods=((DEP,), (DEPENDENT,), (DEP, DEPENDENT))
    )
    data = _encoder(BLOCK_SOURCE, tokens).encode()
    assert _rows(data) == [
        (0, 0, 7, 0, 0),
        (0, 8, 8, 1, 1),
        (1, 2, 8, 2, 1),
        (1, 2, 8, 2, 2),
        (1, 2, 9, 2, 3),
    ]


def test_unsupported():
    tokens = _five_tokens(
        label_mods=(DEP,), attr_mods=((DEP,), (DEPENDENT,), (DEP, DEPENDENT))
    )
    data = _encoder(
        BLOCK_SOURCE, tokens, types=["type", "property"], modifiers=["deprecated"]
    ).encode()
    assert _rows(data) == [
        (0, 0, 7, 0, 0),
        (1, 2, 8, 1, 1),
        (1, 2, 8, 1, 0),
        (1, 2, 9, 1, 1),
    ]


def test_encode_length_is_multiple_of_five():
    data = _encoder(BLOCK_SOURCE, _five_tokens()).encode()
    assert len(data) == 25


def test_legends_keep_server_order():
    assert token_types_legend(["variable", "type", "unknown"]) == [TokenType.TYPE, TokenType.VARIABLE]
    assert token_modifiers_legend(["modification"]) == [TokenModifier.MODIFICATION]
    assert token_types_legend([]) == []


def test_type_index_and_bit_mask():
    legend = token_types_legend(SERVER_TYPES)
    assert type_index(legend, TokenType.PROPERTY) == 2
    assert type_index(legend, TokenType.CLASS) == -1
    mod_legend = list(SERVER_TOKEN_MODIFIERS)
    assert modifier_bit_mask(mod_legend, [TokenModifier.MODIFICATION]) == 2
    assert modifier_bit_mask(mod_legend, mod_legend) == 3
    assert modifier_bit_mask(mod_legend, []) == 0


@pytest.mark.parametrize(
    "full, expected",
    [(True, True), (False, False), ({"delta": True}, True), (None, False)],
)
def test_full_request_supported(full, expected):
    assert full_request_supported(full) is expected
# azapilsp

Building blocks for a language server that understands `azapi` resources in
Terraform configurations. It is a plain library with no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `azapilsp.ranges`: 1-based source positions and ranges (`Pos`, `HclRange`),
  source diagnostics (`HclDiagnostic`, `HclSeverity`) and their 0-based LSP
  counterparts (`Position`, `Range`, `Diagnostic`, `DiagnosticSeverity`),
  plus `MarkupContent`, `TextEdit`, `Command` and `CompletionItem`, each with a
  `to_dict()` giving the LSP wire form. `hcl_pos_to_lsp`, `hcl_range_to_lsp`,
  `hcl_severity_to_lsp` and `hcl_diags_to_lsp` do the conversions;
  `hcl_severity_to_lsp` raises `ValueError` for an invalid severity.
- `azapilsp.tokens`: LSP token types and modifiers (`TokenType`,
  `TokenModifier`), the source token kinds (`SemanticTokenType`,
  `SemanticTokenModifier`, `SemanticToken`), the legend helpers
  `token_types_legend`, `token_modifiers_legend`, `type_index`,
  `modifier_bit_mask` and `full_request_supported`, and `TokenEncoder`, whose
  `encode()` returns the relative five-integer stream of a semantic tokens
  response. Multiline tokens are split into one entry per line.
- `azapilsp.code_actions`: `CodeActions`, a mapping of action kind to enabled
  flag with `as_list()` and `only(kinds)`; `SUPPORTED_CODE_ACTIONS`; and
  `LanguageID`.
- `azapilsp.session`: the session lifecycle. `Session` moves through the
  `SessionState` values with `prepare()`, `initialize(request_id)`,
  `confirm_initialization(request_id)`, `shutdown(request_id)` and `exit()`,
  and raises `SessionError` or `UnexpectedSessionState` (each carrying an
  optional JSON-RPC `ErrorCode`) when a step comes out of order.
- `azapilsp.diagnostics`: `Diagnostics`, keyed by filename and then by the
  source that produced them, and `Notifier`, which sends one
  `textDocument/publishDiagnostics` notification per file from a background
  thread to any object with a `notify(method, params)` method.
- `azapilsp.messages`: validation messages (`error_mismatch`,
  `error_should_define`, `error_should_not_define`, ...) and the "did you
  mean" suggestion through `get_suggestion` and `edit_distance`.
- `azapilsp.candidates`: value candidates (locations, identity types,
  booleans, HTTP methods), the `jsonencode` body snippet, and key and
  required-properties candidates built from `SchemaProperty` and
  `PropertySet`.
- `azapilsp.resources`: the built-in schema of the `azapi_*` resources and
  data sources (`RESOURCES`, `Resource`, `Property`), `get_resource_schema`,
  `fixed_value_candidates_func` and `properties_candidates`.
- `azapilsp.hover`: `make_hover`, the LSP hover result describing one
  property.

## Examples

```python
from azapilsp.hover import make_hover
from azapilsp.ranges import HclRange, Pos
from azapilsp.resources import get_resource_schema

resource = get_resource_schema("resource.azapi_resource")
prop = resource.get_property("location")

name_range = HclRange(start=Pos(2, 3, 20), end=Pos(2, 11, 28))
hover = make_hover(prop.name, prop.modifier, prop.type, prop.description, name_range)
print(hover["contents"]["value"])
print(hover["range"])  # {'start': {'line': 1, 'character': 2}, 'end': {'line': 1, 'character': 10}}
```

```python
from azapilsp.messages import error_should_not_define

print(error_should_not_define("identity1", ["identity", "tags"]))
# `identity1` is not expected here. Do you mean `identity`?
```

```python
from azapilsp.session import Session, SessionError

session = Session(exit_func=lambda: None)
session.prepare()
try:
    session.check_initialization_is_confirmed()
except SessionError as exc:
    print(exc.code, exc)
```

## What this package does not do

It has no JSON-RPC transport or server loop, no command to start a language
server, no document store, and no HCL parser. It therefore does not itself
find the block or attribute under the cursor, nor validate a request body
against Azure resource type definitions; it supplies the pieces (conversions,
messages, candidates, schemas, session state, token encoding) that such a
server would use.
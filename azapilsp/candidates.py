"""Completion candidates for values and for properties of a request body."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping, Sequence

from azapilsp.ranges import (
    ADJUST_INDENTATION,
    MARKDOWN,
    PLAIN_TEXT_FORMAT,
    PROPERTY_COMPLETION,
    SNIPPET_COMPLETION,
    SNIPPET_FORMAT,
    VALUE_COMPLETION,
    Command,
    CompletionItem,
    MarkupContent,
    Range,
    TextEdit,
)

TRIGGER_SUGGEST_COMMAND = "editor.action.triggerSuggest"

_PULLED_OUT_NAMES = frozenset({"name", "location", "identity", "tags"})

_LOCATIONS: tuple[str, ...] = (
    "westus",
    "westus2",
    "eastus",
    "centralus",
    "centraluseuap",
    "southcentralus",
    "northcentralus",
    "westcentralus",
    "eastus2",
    "eastus2euap",
    "brazilsouth",
    "brazilus",
    "northeurope",
    "westeurope",
    "eastasia",
    "southeastasia",
    "japanwest",
    "japaneast",
    "koreacentral",
    "koreasouth",
    "southindia",
    "westindia",
    "centralindia",
    "australiaeast",
    "australiasoutheast",
    "canadacentral",
    "canadaeast",
    "uksouth",
    "ukwest",
    "francecentral",
    "francesouth",
    "australiacentral",
    "australiacentral2",
    "uaecentral",
    "uaenorth",
    "southafricanorth",
    "southafricawest",
    "switzerlandnorth",
    "switzerlandwest",
    "germanynorth",
    "germanywestcentral",
    "norwayeast",
    "norwaywest",
    "brazilsoutheast",
    "westus3",
    "swedencentral",
    "swedensouth",
    "chinaeast",
    "chinanorth",
    "chinanorth2",
    "chinaeast2",
    "usgovvirginia",
    "usgoviowa",
    "usdodeast",
    "usdodcentral",
    "usgovtexas",
    "usgovarizona",
    "germanycentral",
    "germanynortheast",
)


class Modifier(str, Enum):
    """Whether a schema property must be present."""

    OPTIONAL = "Optional"
    REQUIRED = "Required"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SchemaProperty:
    """A property allowed in a request body, as described by the resource schema."""

    name: str
    description: str = ""
    modifier: Modifier = Modifier.OPTIONAL
    type: str = ""
    value: str = ""


@dataclass
class PropertySet:
    """A named group of properties, keyed by property name."""

    name: str = ""
    properties: dict[str, SchemaProperty] = field(default_factory=dict)


def supported_locations() -> list[str]:
    """The Azure regions offered as location values."""
    return list(_LOCATIONS)


def trigger_suggest_command() -> Command:
    """The editor command that reopens the suggestion list after insertion."""
    return Command(title="Suggest", command=TRIGGER_SUGGEST_COMMAND)


def value_candidates(values: Iterable[str], rng: Range, is_ordered: bool) -> list[CompletionItem]:
    """Plain value candidates; ordered ones keep their given order when sorted."""
    candidates: list[CompletionItem] = []
    for index, value in enumerate(values):
        literal = value.strip('"')
        sort_text = f"{index:04d}" if is_ordered else "0" + literal
        candidates.append(
            CompletionItem(
                label=value,
                kind=VALUE_COMPLETION,
                documentation=MarkupContent(MARKDOWN, f"Value: `{literal}`  \n"),
                sort_text=sort_text,
                insert_text_format=PLAIN_TEXT_FORMAT,
                insert_text_mode=ADJUST_INDENTATION,
                text_edit=TextEdit(range=rng, new_text=value),
            )
        )
    return candidates


def location_candidates(prefix: str | None, rng: Range) -> list[CompletionItem]:
    return value_candidates((f'"{location}"' for location in _LOCATIONS), rng, True)


def identity_types_candidates(prefix: str | None, rng: Range) -> list[CompletionItem]:
    values = ['"SystemAssigned"', '"UserAssigned"', '"SystemAssigned, UserAssigned"']
    return value_candidates(values, rng, False)


def bool_candidates(prefix: str | None, rng: Range) -> list[CompletionItem]:
    return value_candidates(["true", "false"], rng, False)


def resource_http_method_candidates(prefix: str | None, rng: Range) -> list[CompletionItem]:
    return value_candidates(['"POST"', '"PATCH"', '"PUT"', '"DELETE"'], rng, True)


def data_source_http_method_candidates(prefix: str | None, rng: Range) -> list[CompletionItem]:
    return value_candidates(['"POST"', '"GET"'], rng, True)


def body_jsonencode_func_candidate() -> CompletionItem:
    """A snippet wrapping the body in a jsonencode call."""
    return CompletionItem(
        label="jsonencode({})",
        kind=VALUE_COMPLETION,
        documentation=MarkupContent(
            MARKDOWN, "`jsonencode` encodes a given value to a string using JSON syntax."
        ),
        sort_text="jsonencode",
        insert_text_format=SNIPPET_FORMAT,
        insert_text_mode=ADJUST_INDENTATION,
        text_edit=TextEdit(range=Range(), new_text="jsonencode({\n\t$0\n})"),
        command=trigger_suggest_command(),
    )


def _assignment_snippet(name: str, prop_type: str, placeholder: str) -> str:
    if prop_type == "string":
        return f'{name} = "{placeholder}"'
    if prop_type == "array":
        return f"{name} = [{placeholder}]"
    if prop_type == "object":
        return f"{name} = {{\n\t{placeholder}\n}}"
    return f"{name} = {placeholder}"


def key_candidates(props: Iterable[SchemaProperty], rng: Range) -> list[CompletionItem]:
    """One candidate per distinct property name; required ones sort first."""
    candidates: list[CompletionItem] = []
    seen: set[str] = set()
    for prop in props:
        if prop.name in seen:
            continue
        seen.add(prop.name)
        prefix = "0" if prop.modifier == Modifier.REQUIRED else "1"
        candidates.append(
            CompletionItem(
                label=prop.name,
                kind=PROPERTY_COMPLETION,
                detail=f"{prop.name} ({prop.modifier})",
                documentation=MarkupContent(
                    MARKDOWN, f"Type: `{prop.type}`  \n{prop.description}\n"
                ),
                sort_text=prefix + prop.name,
                insert_text_format=SNIPPET_FORMAT,
                insert_text_mode=ADJUST_INDENTATION,
                text_edit=TextEdit(range=rng, new_text=_assignment_snippet(prop.name, prop.type, "$0")),
                command=trigger_suggest_command(),
            )
        )
    return candidates


def required_properties_candidates(
    property_sets: Iterable[PropertySet], rng: Range
) -> list[CompletionItem]:
    """A snippet per non-empty property set filling in all of its properties."""
    candidates: list[CompletionItem] = []
    for property_set in property_sets:
        if not property_set.properties:
            continue
        parts: list[str] = []
        index = 1
        for prop in sorted(property_set.properties.values(), key=lambda p: p.name):
            if prop.value:
                parts.append(f'{prop.name} = "{prop.value}"\n')
            else:
                parts.append(_assignment_snippet(prop.name, prop.type, f"${index}") + "\n")
                index += 1
        new_text = "".join(parts)

        name = property_set.name
        label = f"required-properties-{name}" if name else "required-properties"
        detail = f"Required properties - {name}" if name else "Required properties"
        candidates.append(
            CompletionItem(
                label=label,
                kind=SNIPPET_COMPLETION,
                detail=detail,
                documentation=MarkupContent(
                    MARKDOWN, f"Type: `{name}`  \n```\n{new_text}\n```\n"
                ),
                sort_text="0",
                insert_text_format=SNIPPET_FORMAT,
                insert_text_mode=ADJUST_INDENTATION,
                text_edit=TextEdit(range=rng, new_text=new_text),
                command=trigger_suggest_command(),
            )
        )
    return candidates


def is_property_pulled_out(prop: SchemaProperty) -> bool:
    """Whether a property is configured outside of the body."""
    return prop.name in _PULLED_OUT_NAMES


def ignore_pulled_out_properties(props: Sequence[SchemaProperty]) -> list[SchemaProperty]:
    return [p for p in props if not is_property_pulled_out(p)]


def ignore_pulled_out_properties_from_property_set(
    properties: Mapping[str, SchemaProperty],
) -> dict[str, SchemaProperty]:
    return {p.name: p for p in properties.values() if not is_property_pulled_out(p)}
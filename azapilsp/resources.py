"""Schemas of the configuration blocks the language server understands."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, Sequence

from azapilsp.candidates import (
    body_jsonencode_func_candidate,
    bool_candidates,
    data_source_http_method_candidates,
    identity_types_candidates,
    location_candidates,
    resource_http_method_candidates,
    trigger_suggest_command,
)
from azapilsp.ranges import (
    ADJUST_INDENTATION,
    MARKDOWN,
    PROPERTY_COMPLETION,
    SNIPPET_FORMAT,
    CompletionItem,
    MarkupContent,
    Range,
    TextEdit,
)

ValueCandidatesFunc = Callable[[str | None, Range], list[CompletionItem]]


@dataclass(frozen=True)
class Property:
    """An attribute or nested block of a configuration block."""

    name: str
    modifier: str = "Optional"
    type: str = ""
    description: str = ""
    completion_new_text: str = ""
    value_candidates_func: ValueCandidatesFunc | None = None
    nested_properties: tuple["Property", ...] = ()


@dataclass(frozen=True)
class Resource:
    """A configuration block kind, such as `resource.azapi_resource`."""

    name: str
    properties: tuple[Property, ...] = field(default_factory=tuple)

    def get_property(self, name: str) -> Property | None:
        """The property with the given name, or None."""
        return next((p for p in self.properties if p.name == name), None)


def fixed_value_candidates_func(items: Sequence[CompletionItem]) -> ValueCandidatesFunc:
    """A candidates function that always offers `items`, placed at the requested range."""

    def candidates(prefix: str | None, rng: Range) -> list[CompletionItem]:
        return [
            replace(item, text_edit=replace(item.text_edit, range=rng))
            if item.text_edit is not None
            else replace(item)
            for item in items
        ]

    return candidates


def properties_candidates(props: Iterable[Property], rng: Range) -> list[CompletionItem]:
    """Candidates for top-level properties, kept in their declared order."""
    return [
        CompletionItem(
            label=prop.name,
            kind=PROPERTY_COMPLETION,
            detail=f"{prop.name} ({prop.modifier})",
            documentation=MarkupContent(MARKDOWN, f"Type: `{prop.type}`  \n{prop.description}\n"),
            sort_text=f"{index:04d}",
            insert_text_format=SNIPPET_FORMAT,
            insert_text_mode=ADJUST_INDENTATION,
            text_edit=TextEdit(range=rng, new_text=prop.completion_new_text),
            command=trigger_suggest_command(),
        )
        for index, prop in enumerate(props)
    ]


def _type_property(description: str = "Azure Resource Manager type.") -> Property:
    return Property(
        name="type",
        modifier="Required",
        type="string <resource-type>@<api-version>",
        description=description,
        completion_new_text='type = "$0"',
    )


def _body_property(description: str) -> Property:
    return Property(
        name="body",
        modifier="Optional",
        type="string <JSON>",
        description=description,
        completion_new_text="body = $0",
        value_candidates_func=fixed_value_candidates_func([body_jsonencode_func_candidate()]),
    )


_RESPONSE_EXPORT_DESCRIPTION = (
    "A list of path that needs to be exported"
    " from response body."
)


def _response_export_values() -> Property:
    return Property(
        name="response_export_values",
        modifier="Optional",
        type="list<string>",
        description=_RESPONSE_EXPORT_DESCRIPTION,
        completion_new_text="response_export_values = [$0]",
    )


def _locks() -> Property:
    return Property(
        name="locks",
        modifier="Optional",
        type="list<string>",
        description="A list of ARM resource IDs which are used to avoid create/modify/delete azapi resources at the same time.",
        completion_new_text="locks = [$0]",
    )


def _ignore_casing() -> Property:
    return Property(
        name="ignore_casing",
        modifier="Optional",
        type="bool",
        description="Whether ignore incorrect casing returned in `body` to suppress plan-diff. Defaults to `false`.",
        completion_new_text="ignore_casing = $0",
        value_candidates_func=bool_candidates,
    )


def _ignore_missing_property() -> Property:
    return Property(
        name="ignore_missing_property",
        modifier="Optional",
        type="bool",
        description="Whether ignore not returned properties like credentials in `body` to suppress plan-diff. Defaults to `false`.",
        completion_new_text="ignore_missing_property = $0",
        value_candidates_func=bool_candidates,
    )


def _action_properties(method_candidates: ValueCandidatesFunc) -> tuple[Property, ...]:
    return (
        _type_property(),
        Property(
            name="resource_id",
            modifier="Required",
            type="string",
            description="The ID of an existing azure source.",
            completion_new_text="resource_id = $0",
        ),
        Property(
            name="action",
            modifier="Optional",
            type="string",
            description="Specifies the name of the azure resource action.",
            completion_new_text='action = "$0"',
        ),
        Property(
            name="method",
            modifier="Optional",
            type="string",
            description="Specifies the Http method of the azure resource action. Defaults to `POST`",
            completion_new_text="method = $0",
            value_candidates_func=method_candidates,
        ),
        _body_property("A JSON object that contains the request body."),
        _response_export_values(),
    )


_ALTERNATIVE_ID = "\n\nConfiguring `name` and `parent_id` is an alternative way to configure `resource_id`."
_BODY_DESCRIPTION = "A JSON object that contains the request body used to create and update azure resource."

RESOURCES: tuple[Resource, ...] = (
    Resource(
        name="resource.azapi_resource",
        properties=(
            _type_property(),
            Property(
                name="name",
                modifier="Required",
                type="string",
                description="Specifies the name of the azure resource. Changing this forces a new resource to be created.",
                completion_new_text='name = "$0"',
            ),
            Property(
                name="parent_id",
                modifier="Required",
                type="string",
                description="The ID of the azure resource in which this resource is created. Changing this forces a new resource to be created.",
                completion_new_text="parent_id = $0",
            ),
            Property(
                name="location",
                modifier="Optional",
                type="string",
                description="The Azure Region where the azure resource should exist.",
                completion_new_text='location = "$0"',
                value_candidates_func=location_candidates,
            ),
            Property(
                name="identity",
                modifier="Optional",
                type="block",
                description="Managed identities which should be assigned to the azure resource.",
                completion_new_text='identity {\n\ttype = "$1"\n\tidentity_ids = [$2]\n}\n',
                nested_properties=(
                    Property(
                        name="type",
                        modifier="Required",
                        type="string",
                        description="The Type of Identity which should be used for this azure resource. Possible values are `SystemAssigned`, `UserAssigned` and `SystemAssigned, UserAssigned`.",
                        completion_new_text='type = "$0"',
                        value_candidates_func=identity_types_candidates,
                    ),
                    Property(
                        name="identity_ids",
                        modifier="Optional",
                        type="list<string>",
                        description="A list of User Managed Identity ID's which should be assigned to the azure resource.",
                        completion_new_text="identity_ids = [$0]",
                    ),
                ),
            ),
            _body_property(_BODY_DESCRIPTION),
            Property(
                name="tags",
                modifier="Optional",
                type="map<string, string>",
                description="A mapping of tags which should be assigned to the azure resource.",
                completion_new_text="tags = $0",
            ),
            _response_export_values(),
            Property(
                name="schema_validation_enabled",
                modifier="Optional",
                type="bool",
                description="Whether enabled the validation on `type` and `body` with embedded schema. Defaults to `true`.",
                completion_new_text="schema_validation_enabled = $0",
                value_candidates_func=bool_candidates,
            ),
            _locks(),
            _ignore_casing(),
            _ignore_missing_property(),
        ),
    ),
    Resource(
        name="resource.azapi_update_resource",
        properties=(
            _type_property(),
            Property(
                name="name",
                modifier="Optional",
                type="string",
                description="Specifies the name of the azure resource. Changing this forces a new resource to be created." + _ALTERNATIVE_ID,
                completion_new_text='name = "$0"',
            ),
            Property(
                name="parent_id",
                modifier="Optional",
                type="string",
                description="The ID of the azure resource in which this resource is created. Changing this forces a new resource to be created." + _ALTERNATIVE_ID,
                completion_new_text="parent_id = $0",
            ),
            Property(
                name="resource_id",
                modifier="Optional",
                type="string",
                description="The ID of an existing azure source. Changing this forces a new resource to be created." + _ALTERNATIVE_ID,
                completion_new_text="resource_id = $0",
            ),
            _body_property(_BODY_DESCRIPTION),
            _response_export_values(),
            _locks(),
            _ignore_casing(),
            _ignore_missing_property(),
        ),
    ),
    Resource(
        name="data.azapi_resource",
        properties=(
            _type_property(),
            Property(
                name="name",
                modifier="Optional",
                type="string",
                description="Specifies the name of the azure resource.",
                completion_new_text='name = "$0"',
            ),
            Property(
                name="parent_id",
                modifier="Optional",
                type="string",
                description="The ID of the azure resource in which this resource is created.",
                completion_new_text="parent_id = $0",
            ),
            Property(
                name="resource_id",
                modifier="Optional",
                type="string",
                description="The ID of an existing azure source." + _ALTERNATIVE_ID,
                completion_new_text="resource_id = $0",
            ),
            _response_export_values(),
        ),
    ),
    Resource(
        name="resource.azapi_resource_action",
        properties=_action_properties(resource_http_method_candidates),
    ),
    Resource(
        name="data.azapi_resource_action",
        properties=_action_properties(data_source_http_method_candidates),
    ),
)


def get_resource_schema(name: str) -> Resource | None:
    """The schema of the block kind `name`, or None if it is not known."""
    return next((r for r in RESOURCES if r.name == name), None)
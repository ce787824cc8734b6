import pytest

from azapilsp.candidates import supported_locations
from azapilsp.ranges import CompletionItem, Position, Range, TextEdit
from azapilsp.resources import (
    RESOURCES,
    Property,
    Resource,
    fixed_value_candidates_func,
    get_resource_schema,
    properties_candidates,
)

RNG = Range(Position(3, 2), Position(3, 7))

KNOWN_NAMES = [
    "resource.azapi_resource",
    "resource.azapi_update_resource",
    "data.azapi_resource",
    "resource.azapi_resource_action",
    "data.azapi_resource_action",
]


@pytest.mark.parametrize("name", KNOWN_NAMES)
def test_known_resource_names(name):
    found = get_resource_schema(name)
    assert found is not None
    assert found.name == name
    assert found in RESOURCES


def test_unknown_resource_is_none():
    assert get_resource_schema("resource.azurerm_thing") is None


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: r.name)
def test_lookup_round_trip_and_type_required(resource):
    found = get_resource_schema(resource.name)
    assert found == resource
    assert found.get_property("type").modifier == "Required"


def test_get_property_missing():
    assert get_resource_schema("resource.azapi_resource").get_property("nope") is None


def test_get_property_on_custom_resource():
    prop = Property(name="x", completion_new_text="x = $0")
    res = Resource(name="r", properties=(prop,))
    assert res.get_property("x") is prop


def test_update_resource_name_optional_and_required_in_create():
    assert get_resource_schema("resource.azapi_update_resource").get_property("name").modifier == "Optional"
    assert get_resource_schema("resource.azapi_resource").get_property("name").modifier == "Required"


def test_response_export_values_description():
    prop = get_resource_schema("data.azapi_resource").get_property("response_export_values")
    assert prop.description.startswith("A list of path that needs to be exported")
    assert prop.description.endswith("response body.")


def test_identity_nested_properties():
    identity = get_resource_schema("resource.azapi_resource").get_property("identity")
    assert [p.name for p in identity.nested_properties] == ["type", "identity_ids"]
    values = identity.nested_properties[0].value_candidates_func(None, RNG)
    assert [c.label for c in values] == [
        '"SystemAssigned"',
        '"UserAssigned"',
        '"SystemAssigned, UserAssigned"',
    ]


def test_location_candidates_cover_all_locations():
    loc = get_resource_schema("resource.azapi_resource").get_property("location")
    items = loc.value_candidates_func(None, RNG)
    assert [c.label for c in items] == [f'"{x}"' for x in supported_locations()]


def test_method_candidates_differ_between_resource_and_data():
    res = get_resource_schema("resource.azapi_resource_action").get_property("method")
    data = get_resource_schema("data.azapi_resource_action").get_property("method")
    assert [c.label for c in res.value_candidates_func(None, RNG)] == ['"POST"', '"PATCH"', '"PUT"', '"DELETE"']
    assert [c.label for c in data.value_candidates_func(None, RNG)] == ['"POST"', '"GET"']


def test_body_candidates_jsonencode_at_range():
    body = get_resource_schema("resource.azapi_resource").get_property("body")
    items = body.value_candidates_func(None, RNG)
    assert len(items) == 1
    assert items[0].label == "jsonencode({})"
    assert items[0].text_edit.range == RNG
    assert items[0].text_edit.new_text == "jsonencode({\n\t$0\n})"


def test_fixed_value_candidates_func_sets_range_and_keeps_items_without_edit():
    items = [
        CompletionItem(label="a", text_edit=TextEdit(range=Range(), new_text="a")),
        CompletionItem(label="b"),
    ]
    func = fixed_value_candidates_func(items)
    result = func("prefix", RNG)
    assert [c.label for c in result] == ["a", "b"]
    assert result[0].text_edit.range == RNG
    assert result[1].text_edit is None
    assert items[0].text_edit.range == Range()


def test_properties_candidates_order_and_text():
    props = get_resource_schema("data.azapi_resource").properties
    items = properties_candidates(props, RNG)
    assert [c.label for c in items] == [p.name for p in props]
    assert [c.text_edit.new_text for c in items] == [p.completion_new_text for p in props]
    assert [c.sort_text for c in items] == sorted(c.sort_text for c in items)
    assert items[0].sort_text == "0000"
    assert items[0].detail == "type (Required)"
    assert all(c.text_edit.range == RNG for c in items)
    assert items[0].command.command == "editor.action.triggerSuggest"


def test_properties_candidates_documentation():
    prop = get_resource_schema("data.azapi_resource").get_property("name")
    (item,) = properties_candidates([prop], RNG)
    assert item.documentation.value == f"Type: `{prop.type}`  \n{prop.description}\n"
    assert item.documentation.kind == "markdown"
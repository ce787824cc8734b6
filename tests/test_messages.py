import pytest

from azapilsp.messages import (
    edit_distance,
    error_mismatch,
    error_not_match_any,
    error_not_match_any_values,
    error_should_define,
    error_should_not_define,
    error_should_not_define_read_only,
    get_suggestion,
)


def test_should_define_message():
    assert error_should_define("vaultBaseUrl") == (
        "`vaultBaseUrl` is required, but no definition was found"
    )


def test_should_not_define_suggests_closest():
    message = error_should_not_define("identity1", ["location", "name", "identity"])
    assert message == "`identity1` is not expected here. Do you mean `identity`? "


@pytest.mark.parametrize(
    "build",
    [
        lambda k: error_mismatch(k, "a", "b"),
        error_not_match_any,
        error_should_define,
        error_should_not_define_read_only,
        lambda k: error_should_not_define(k, ["other"]),
        lambda k: error_not_match_any_values(k, "v", ["w"]),
    ],
)
def test_leading_dot_is_stripped(build):
    assert build(".prop") == build("prop")
    assert build("prop").startswith("`prop`")


def test_not_match_any_values_lists_options():
    options = ["Standard", "Premium"]
    message = error_not_match_any_values("sku", "Basic", options)
    assert "[Standard, Premium]" in message
    assert "`Basic`" in message
    assert message.endswith("? ")


def test_not_match_any_message():
    assert error_not_match_any("kind") == "`kind` doesn't match any accepted values"


def test_suggestion_with_no_options_is_empty():
    assert get_suggestion("anything", []) == ""


def test_exact_match_is_suggested():
    assert get_suggestion("identity", ["location", "name", "identity"]) == "identity"


def test_suggestion_is_one_of_options():
    options = ["westus", "eastus", "centralus"]
    assert get_suggestion("northus", options) in options


@pytest.mark.parametrize("text", ["", "a", "identity", "Microsoft.Resources"])
def test_distance_to_self_is_zero(text):
    assert edit_distance(text, text) == 0


@pytest.mark.parametrize("text", ["a", "location", "kind"])
def test_distance_with_empty_is_zero(text):
    assert edit_distance("", text) == 0
    assert edit_distance(text, "") == 0


@pytest.mark.parametrize(
    "a,b",
    [("identity1", "identity"), ("kitten", "sitting"), ("abc", "xyz"), ("name", "location")],
)
def test_distance_bounds_and_symmetry(a, b):
    d = edit_distance(a, b)
    assert 0 <= d <= min(len(a), len(b))
    assert d == edit_distance(b, a)
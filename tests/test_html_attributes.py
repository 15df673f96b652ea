import pytest

from govuk_components.html_attributes import (
    class_names,
    deep_merge_html_attributes,
    render_attributes,
)


def test_class_names_keeps_enabled_modifiers_in_declared_order():
    result = class_names(
        "govuk-link",
        {"govuk-link--inverse": True, "govuk-link--muted": False, "govuk-link--no-underline": True},
    )
    assert result == "govuk-link govuk-link--inverse govuk-link--no-underline"


def test_class_names_skips_none_and_duplicates():
    assert class_names("govuk-tag", None, "govuk-tag", ["extra"]) == "govuk-tag extra"


def test_merge_appends_caller_classes():
    merged = deep_merge_html_attributes({"class": "govuk-link"}, {"class": "app-link"})
    assert merged == {"class": "govuk-link app-link"}


def test_merge_flattens_class_lists_and_drops_duplicates():
    merged = deep_merge_html_attributes(
        {"class": "govuk-link app-link"}, {"class": ["app-link", "app-link--large"]}
    )
    assert merged["class"] == "govuk-link app-link app-link--large"


def test_merge_scalar_override_wins():
    merged = deep_merge_html_attributes(
        {"class": "govuk-link", "target": "_blank", "rel": "noreferrer noopener"},
        {"rel": "nofollow"},
    )
    assert merged == {"class": "govuk-link", "target": "_blank", "rel": "nofollow"}


def test_merge_nested_aria_maps_key_by_key():
    merged = deep_merge_html_attributes(
        {"disabled": True, "aria": {"disabled": True, "describedby": "hint"}},
        {"aria": {"label": "Save", "describedby": "error"}},
    )
    assert merged == {
        "disabled": True,
        "aria": {"disabled": True, "describedby": "hint error", "label": "Save"},
    }


def test_merge_does_not_mutate_inputs():
    base = {"class": "govuk-button", "aria": {"disabled": True}}
    overrides = {"class": "extra", "aria": {"label": "Go"}}
    deep_merge_html_attributes(base, overrides)

    assert base == {"class": "govuk-button", "aria": {"disabled": True}}
    assert overrides == {"class": "extra", "aria": {"label": "Go"}}


@pytest.mark.parametrize(
    "base",
    [
        {},
        {"class": "govuk-link"},
        {"class": "govuk-button", "disabled": True, "aria": {"disabled": True}},
    ],
)
def test_merge_with_empty_overrides_is_identity(base):
    assert deep_merge_html_attributes(base, {}) == base
    assert deep_merge_html_attributes(base, None) == base


def test_merging_same_overrides_twice_matches_merging_once():
    base = {"class": "govuk-link", "target": "_blank"}
    overrides = {"class": "app-link", "target": "_self", "aria": {"label": "Home"}}

    once = deep_merge_html_attributes(base, overrides)
    twice = deep_merge_html_attributes(once, overrides)

    assert twice == once


def test_merge_is_associative_for_non_conflicting_keys():
    a = {"id": "start", "class": "govuk-button"}
    b = {"aria": {"label": "Start now"}, "class": "app-start"}
    c = {"data": {"module": "govuk-button"}, "class": "app-start--large"}

    left = deep_merge_html_attributes(deep_merge_html_attributes(a, b), c)
    right = deep_merge_html_attributes(a, deep_merge_html_attributes(b, c))

    assert left == right


def test_render_attributes_flattens_aria_and_data():
    rendered = render_attributes(
        {
            "class": "govuk-button",
            "disabled": True,
            "aria": {"disabled": True},
            "data": {"module_name": "govuk-button", "prevent_double_click": False},
        }
    )
    assert rendered == (
        ' class="govuk-button" disabled="disabled" aria-disabled="true"'
        ' data-module-name="govuk-button" data-prevent-double-click="false"'
    )


def test_render_attributes_omits_false_and_none():
    assert render_attributes({"hidden": False, "title": None, "class": ""}) == ""


def test_render_attributes_escapes_values():
    rendered = render_attributes({"title": 'say "hi" <b>'})
    assert rendered == ' title="say &#34;hi&#34; &lt;b&gt;"'


@pytest.mark.parametrize("key", ["controls", "flowto", "labelledby", "owns"])
def test_merge_joins_aria_id_references(key):
    merged = deep_merge_html_attributes({"aria": {key: "panel-1"}}, {"aria": {key: "panel-2 panel-1"}})
    assert merged == {"aria": {key: "panel-1 panel-2"}}

import pytest
from bs4 import BeautifulSoup
from markupsafe import Markup

from govuk_components.config import ComponentsConfig
from govuk_components.context import RenderContext
from govuk_components.errors import InvalidColourError, MissingContentError
from govuk_components.tag import COLOURS, TagComponent, render_tag


@pytest.fixture()
def ctx() -> RenderContext:
    return RenderContext()


def _strong(markup: str):
    return BeautifulSoup(str(markup), "html.parser").find("strong")


@pytest.mark.parametrize("colour", COLOURS)
def test_each_colour_adds_exactly_one_modifier(ctx: RenderContext, colour: str):
    tag = _strong(render_tag(ctx, text="Completed", colour=colour))

    modifiers = [name for name in tag["class"] if name.startswith("govuk-tag--")]
    assert modifiers == [f"govuk-tag--{colour}"]
    assert tag.get_text() == "Completed"


@pytest.mark.parametrize("colour", [None, "", "   "])
def test_blank_colour_has_no_modifier(ctx: RenderContext, colour):
    tag = _strong(render_tag(ctx, text="Draft", colour=colour))
    assert tag["class"] == ["govuk-tag"]


def test_unknown_colour_is_rejected(ctx: RenderContext):
    with pytest.raises(InvalidColourError, match="magenta") as excinfo:
        render_tag(ctx, text="Oops", colour="magenta")

    message = str(excinfo.value)
    assert message == (
        "invalid tag colour magenta, supported colours are grey, green, turquoise, "
        "blue, red, purple, pink, orange, and yellow"
    )
    assert excinfo.value.colour == "magenta"
    assert excinfo.value.allowed == COLOURS


def test_colour_is_validated_when_the_component_is_built():
    with pytest.raises(InvalidColourError):
        TagComponent(text="Oops", colour="Blue")


def test_missing_text_and_content_fails(ctx: RenderContext):
    with pytest.raises(MissingContentError, match="no text or content"):
        render_tag(ctx, colour="blue")


def test_content_is_used_when_text_is_missing(ctx: RenderContext):
    tag = _strong(render_tag(ctx, content="In progress"))
    assert tag.get_text() == "In progress"


def test_callable_content_is_called(ctx: RenderContext):
    tag = _strong(render_tag(ctx, content=lambda: Markup("<span>Block</span>")))
    assert tag.span.get_text() == "Block"


def test_text_takes_precedence_over_content(ctx: RenderContext):
    tag = _strong(render_tag(ctx, text="From text", content="From block"))
    assert tag.get_text() == "From text"


def test_caller_classes_and_attributes_are_appended(ctx: RenderContext):
    tag = _strong(
        render_tag(
            ctx,
            text="Submitted",
            colour="blue",
            classes=["app-tag", "govuk-tag"],
            html_attributes={"id": "status", "data": {"status": "submitted"}},
        )
    )

    assert tag["class"] == ["govuk-tag", "govuk-tag--blue", "app-tag"]
    assert tag["id"] == "status"
    assert tag["data-status"] == "submitted"


def test_text_is_escaped(ctx: RenderContext):
    html = render_tag(ctx, text="<script>")
    assert "&lt;script&gt;" in html
    assert "<script>" not in html


def test_brand_prefixes_tag_classes():
    ctx = RenderContext(config=ComponentsConfig(brand="nhsuk"))
    tag = _strong(render_tag(ctx, text="Urgent", colour="red"))
    assert tag["class"] == ["nhsuk-tag", "nhsuk-tag--red"]


def test_component_renders_through_context(ctx: RenderContext):
    component = TagComponent(colour="green")
    html = ctx.render(component, content="Done")
    assert html == '<strong class="govuk-tag govuk-tag--green">Done</strong>'

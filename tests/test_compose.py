"""Tests for the composition pipeline: slot rendering, token collection, compose_interface."""

import pytest

from origen.compose import compose_interface
from origen.compose.composer import NO_MATCH_CODE, NO_MATCH_SUGGESTIONS, Composer
from origen.compose.intent import INTENT_PATTERNS, IntentMatcher
from origen.compose.slots import (
    MarkupRenderer,
    flex_class,
    generate_code,
    group_by_slot,
    render_component,
    render_prop,
)
from origen.compose.tokens import collect_tokens
from origen.exceptions import EmptyIntentError, InputContractError, InvalidOptionError
from origen.types import ComponentDescriptor, IntentPattern, LayoutConfig

LOGIN_CODE = """\
<Card>
  <CardHeader>
    <CardTitle>Sign In</CardTitle>
  </CardHeader>
  <CardContent className="flex flex-col gap-4">
    <Input type="email" placeholder="Email" />
    <Input type="password" placeholder="Password" />
  </CardContent>
  <CardFooter>
    <Button variant="default">Sign In</Button>
  </CardFooter>
</Card>"""

NAVIGATION_CODE = """\
<div className="flex flex-row gap-2">
  <Button variant="ghost">Home</Button>
  <Button variant="ghost">About</Button>
  <Button variant="ghost">Contact</Button>
</div>"""

MODAL_CODE = """\
<Modal>
  <Modal.Trigger>
    <Button>Open</Button>
  </Modal.Trigger>
  <Modal.Content title="Modal">
    {/* Content here */}
  </Modal.Content>
</Modal>"""


def _d(name, slot=None, children=None, **props):
    return ComponentDescriptor(name=name, props=props, slot=slot, children=children)


# ── TestRenderProps ────────────────────────────────────────────────────────────

class TestRenderProps:

    def test_string_is_quoted(self):
        assert render_prop("type", "email") == 'type="email"'

    def test_true_is_bare(self):
        assert render_prop("disabled", True) == "disabled"

    def test_false_is_expression(self):
        assert render_prop("disabled", False) == "disabled={false}"

    def test_number_and_objects_are_json(self):
        assert render_prop("count", 3) == "count={3}"
        assert render_prop("style", {"a": 1}) == 'style={{"a":1}}'
        assert render_prop("items", ["x", "y"]) == 'items={["x","y"]}'

    def test_non_ascii_is_kept_in_json(self):
        assert render_prop("item", {"label": "café"}) == 'item={{"label":"café"}}'

    def test_prop_order_is_insertion_order(self):
        comp = _d("Input", placeholder="Email", type="email", required=True)
        assert render_component(comp) == '<Input placeholder="Email" type="email" required />'

    def test_children_render_open_and_close(self):
        assert render_component(_d("Button", children="Go")) == "<Button>Go</Button>"

    def test_empty_children_self_close(self):
        assert render_component(_d("Button", children="")) == "<Button />"


# ── TestGroupBySlot ────────────────────────────────────────────────────────────

class TestGroupBySlot:

    def test_known_slots_bucketed(self):
        buckets = group_by_slot([
            _d("Card", "wrapper"), _d("CardTitle", "header"), _d("Input", "content"),
            _d("Button", "footer"), _d("Button", "trigger"),
        ])
        assert [c.name for c in buckets.wrapper] == ["Card"]
        assert [c.name for c in buckets.header] == ["CardTitle"]
        assert [c.name for c in buckets.content] == ["Input"]
        assert [c.name for c in buckets.footer] == ["Button"]
        assert [c.name for c in buckets.trigger] == ["Button"]
        assert buckets.unslotted == []

    def test_unknown_and_missing_slots_are_unslotted(self):
        buckets = group_by_slot([_d("a", "sidebar"), _d("b"), _d("c", "banana")])
        assert [c.name for c in buckets.unslotted] == ["a", "b", "c"]


# ── TestGenerateCode ───────────────────────────────────────────────────────────

class TestGenerateCode:

    def test_card_skips_structural_placeholders(self):
        code = generate_code(LayoutConfig(type="stack"), [
            _d("Card", "wrapper"),
            _d("CardHeader", "header"),
            _d("CardTitle", "header", "Hi"),
        ])
        assert code == "<Card>\n  <CardHeader>\n    <CardTitle>Hi</CardTitle>\n  </CardHeader>\n</Card>"

    def test_card_omits_empty_sections(self):
        code = generate_code(LayoutConfig(type="stack"), [_d("Card", "wrapper")])
        assert code == "<Card>\n</Card>"

    def test_card_wins_over_modal(self):
        code = generate_code(LayoutConfig(type="stack"), [_d("Modal", "wrapper"), _d("Card", "wrapper")])
        assert code.startswith("<Card>")

    def test_modal_without_trigger(self):
        code = generate_code(LayoutConfig(type="stack"), [_d("Modal", "wrapper")])
        assert "<Modal.Trigger>" not in code
        assert '<Modal.Content title="Modal">' in code

    def test_modal_ignores_content_slot(self):
        code = generate_code(LayoutConfig(type="stack"), [
            _d("Modal", "wrapper"), _d("Input", "content", placeholder="x"),
        ])
        assert "Input" not in code

    def test_flat_flex_column_without_gap(self):
        assert flex_class(LayoutConfig(type="flex", direction="column")) == "flex flex-col"

    def test_flat_grid_and_stack_have_empty_class(self):
        assert flex_class(LayoutConfig(type="grid", gap="4")) == ""
        code = generate_code(LayoutConfig(type="stack", direction="column", gap="4"), [_d("Button", children="A")])
        assert code == '<div className="">\n  <Button>A</Button>\n</div>'

    def test_flat_renders_each_unslotted_member_once(self):
        code = generate_code(LayoutConfig(type="flex", direction="row"), [
            _d("Button", children="A"), _d("Button", "actions", "B"),
        ])
        assert code.count("<Button>A</Button>") == 1
        assert code.count("<Button>B</Button>") == 1

    def test_page_context_wraps_and_indents(self):
        code = generate_code(LayoutConfig(type="flex", direction="row", gap="2"), [_d("Button", children="A")], "page")
        assert code == (
            '<div className="min-h-screen bg-background p-8">\n'
            '  <div className="flex flex-row gap-2">\n'
            "    <Button>A</Button>\n"
            "  </div>\n"
            "</div>"
        )

    def test_custom_indent(self):
        code = MarkupRenderer(indent="\t").render(LayoutConfig(type="stack"), [_d("Modal", "wrapper")])
        assert "\t<Modal.Content" in code


# ── TestCollectTokens ──────────────────────────────────────────────────────────

class TestCollectTokens:

    def test_sorted_and_unique(self):
        tokens = collect_tokens([_d("Card"), _d("CardFooter"), _d("Card")])
        assert tokens == ["border", "card", "card-foreground"]

    def test_unknown_components_contribute_nothing(self):
        assert collect_tokens([_d("Tooltip"), _d("div")]) == []

    def test_accepts_plain_dicts(self):
        assert collect_tokens([{"name": "Select", "props": {}}]) == ["background", "border", "foreground"]

    def test_empty(self):
        assert collect_tokens([]) == []


# ── TestComposeInterface ───────────────────────────────────────────────────────

class TestComposeInterface:

    def test_login_code(self):
        result = compose_interface("login form with email and password")
        assert result.code == LOGIN_CODE
        assert len(result.components) == 8
        assert result.suggestions is None

    def test_login_layout(self):
        layout = compose_interface("login").layout
        assert layout.type.value == "stack"
        assert layout.direction.value == "column"
        assert layout.gap == "4"

    def test_login_tokens(self):
        assert compose_interface("login").tokens == [
            "background", "border", "card", "card-foreground", "destructive", "foreground",
            "input", "primary", "primary-foreground", "ring", "secondary",
        ]

    def test_navigation_is_flat_flex_row(self):
        result = compose_interface("navigation header")
        assert result.code == NAVIGATION_CODE
        assert result.tokens == ["destructive", "primary", "primary-foreground", "secondary"]

    def test_modal(self):
        result = compose_interface("confirm dialog")
        assert result.code == MODAL_CODE
        assert "background" in result.tokens

    def test_settings_renders_select(self):
        result = compose_interface("settings")
        assert '    <Select placeholder="Choose option" />' in result.code
        assert '    <Button variant="default">Save</Button>' in result.code

    def test_profile_has_no_footer(self):
        code = compose_interface("user profile").code
        assert "<CardFooter>" not in code
        assert "<CardDescription>Manage your account</CardDescription>" in code

    def test_form_injects_detected_fields_after_card_content(self):
        result = compose_interface("contact form with name, email and message")
        names = [c.name for c in result.components]
        assert names == [
            "Card", "CardHeader", "CardTitle", "CardContent",
            "Input", "Input", "Input", "CardFooter", "Button",
        ]
        inputs = [c.props for c in result.components if c.name == "Input"]
        assert inputs == [
            {"type": "email", "placeholder": "Email"},
            {"type": "text", "placeholder": "Text"},
            {"type": "text", "placeholder": "Textarea"},
        ]
        assert all(c.slot == "content" for c in result.components if c.name == "Input")
        assert '<Input type="email" placeholder="Email" />' in result.code

    def test_form_without_fields_keeps_skeleton(self):
        result = compose_interface("simple form")
        assert len(result.components) == len(INTENT_PATTERNS[2].components)

    def test_non_form_pattern_ignores_field_words(self):
        # login matches; "phone" would be a field hint on a form pattern
        result = compose_interface("login with phone")
        assert len(result.components) == 8

    def test_pattern_table_is_not_mutated(self):
        before = len(INTENT_PATTERNS[2].components)
        compose_interface("form with email and phone")
        compose_interface("form with email and phone")
        assert len(INTENT_PATTERNS[2].components) == before

    def test_results_are_independent_copies(self):
        first = compose_interface("login")
        first.components[4].props["type"] = "text"
        assert compose_interface("login").components[4].props["type"] == "email"

    def test_page_context(self):
        code = compose_interface("login", context="page").code
        lines = code.split("\n")
        assert lines[0] == '<div className="min-h-screen bg-background p-8">'
        assert lines[1] == "  <Card>"
        assert lines[2] == "    <CardHeader>"
        assert lines[-2] == "  </Card>"
        assert lines[-1] == "</div>"

    def test_component_context_matches_section(self):
        assert compose_interface("login", "component").code == compose_interface("login", "section").code

    def test_no_match_is_soft(self):
        result = compose_interface("weather widget")
        assert result.components == []
        assert result.tokens == []
        assert result.code == NO_MATCH_CODE
        assert result.suggestions == list(NO_MATCH_SUGGESTIONS)
        assert result.layout.type.value == "stack"
        assert result.layout.gap is None

    @pytest.mark.parametrize("intent", ["", "   ", "\n\t"])
    def test_blank_intent_raises(self, intent):
        with pytest.raises(EmptyIntentError):
            compose_interface(intent)

    @pytest.mark.parametrize("intent", [42, ["login"]])
    def test_non_string_intent_raises(self, intent):
        with pytest.raises(InvalidOptionError) as exc_info:
            compose_interface(intent)
        assert exc_info.value.option == "intent"

    def test_blank_intent_is_input_contract_error(self):
        with pytest.raises(InputContractError):
            compose_interface("")

    def test_invalid_context_raises(self):
        with pytest.raises(InvalidOptionError) as exc_info:
            compose_interface("login", context="screen")
        assert "page, section, component" in str(exc_info.value)

    def test_wire_format(self):
        wire = compose_interface("weather widget").to_wire()
        assert wire["layout"] == {"type": "stack", "direction": "column"}
        assert wire["suggestions"][0] == "login form"
        assert "suggestions" not in compose_interface("login").to_wire()


# ── TestComposer ───────────────────────────────────────────────────────────────

class TestComposer:

    def test_fallback_insertion_two_before_end(self):
        pattern = IntentPattern(
            name="bare-form",
            keywords=("form",),
            components=(_d("A"), _d("B"), _d("C"), _d("D")),
            layout=LayoutConfig(type="stack"),
        )
        composer = Composer(matcher=IntentMatcher([pattern]))
        names = [c.name for c in composer.build_component_list(pattern, "email form")]
        assert names == ["A", "B", "Input", "C", "D"]

    def test_custom_matcher_drives_compose(self):
        pattern = IntentPattern(
            name="toolbar",
            keywords=("toolbar",),
            components=(_d("Button", children="Bold"),),
            layout=LayoutConfig(type="flex", direction="row", gap="1"),
        )
        result = Composer(matcher=IntentMatcher([pattern])).compose("toolbar")
        assert result.code == '<div className="flex flex-row gap-1">\n  <Button>Bold</Button>\n</div>'

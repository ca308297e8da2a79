"""Tests for extracting name/values pairs from controls."""
from __future__ import annotations

from htmlform import (
    Button,
    Checkbox,
    Div,
    FieldSet,
    FormValues,
    Hidden,
    Label,
    OptGroup,
    Option,
    Output,
    Password,
    Radio,
    Select,
    Submit,
    Text,
    TextArea,
    TextContent,
    as_values,
)


class TestCheckable:
    def test_unchecked_checkbox_contributes_nothing(self) -> None:
        assert "a" not in as_values([Checkbox(name="a", value="1")])

    def test_checked_checkbox(self) -> None:
        assert as_values([Checkbox(name="a", value="1", checked=True)]) == {"a": ["1"]}

    def test_checkboxes_sharing_a_name_accumulate(self) -> None:
        values = as_values(
            [
                Checkbox(name="tags", value="x", checked=True),
                Checkbox(name="tags", value="y"),
                Checkbox(name="tags", value="z", checked=True),
            ]
        )

        assert values == {"tags": ["x", "z"]}

    def test_only_the_checked_radio(self) -> None:
        values = as_values([Radio(name="size", value="s"), Radio(name="size", value="m", checked=True)])

        assert values == {"size": ["m"]}


class TestSelect:
    def test_only_selected_top_level_options(self) -> None:
        select = Select(name="plan", options=[Option(value="free"), Option(value="pro", selected=True)])

        assert as_values([select]) == {"plan": ["pro"]}

    def test_no_selection_contributes_nothing(self) -> None:
        assert as_values([Select(name="plan", options=[Option(value="free")])]) == {}

    def test_grouped_options_are_all_taken(self, grouped_select: Select) -> None:
        assert as_values([grouped_select]) == {"car": ["volvo", "saab"]}

    def test_grouped_options_ignore_selected_flag(self) -> None:
        select = Select(
            name="car",
            options=[
                Option(value="fiat", selected=True),
                OptGroup(options=[Option(value="volvo", selected=False), Option(value="saab", selected=True)]),
                Option(value="audi"),
            ],
        )

        assert as_values([select]) == {"car": ["fiat", "volvo", "saab"]}


class TestSingleValue:
    def test_last_value_wins(self) -> None:
        values = as_values([Text(name="q", value="first"), Hidden(name="q", value="second")])

        assert values == {"q": ["second"]}

    def test_set_replaces_accumulated_values(self) -> None:
        values = as_values(
            [
                Checkbox(name="x", value="1", checked=True),
                Checkbox(name="x", value="2", checked=True),
                TextArea(name="x", value="3"),
            ]
        )

        assert values == {"x": ["3"]}

    def test_action_controls(self) -> None:
        values = as_values([Submit(name="go", value="Send"), Button(name="act", value="save")])

        assert values == {"go": ["Send"], "act": ["save"]}

    def test_empty_value_is_still_recorded(self) -> None:
        assert as_values([Text(name="q")]) == {"q": [""]}


class TestTraversal:
    def test_nested_containers_flatten(self) -> None:
        tree = Div(
            controls=[
                Text(name="user", value="ada"),
                FieldSet(controls=[Password(name="secret", value="pw")]),
            ]
        )

        values = as_values([tree])

        assert values == {"user": ["ada"], "secret": ["pw"]}
        assert list(values) == ["user", "secret"]

    def test_multi_values_follow_declared_order_at_any_depth(self) -> None:
        tree = [
            Checkbox(name="n", value="1", checked=True),
            Div(controls=[Div(controls=[Checkbox(name="n", value="2", checked=True)])]),
            Checkbox(name="n", value="3", checked=True),
        ]

        assert as_values(tree)["n"] == ["1", "2", "3"]

    def test_non_valued_controls_contribute_nothing(self) -> None:
        values = as_values(
            [
                Label(text="Name", for_id="n"),
                Output(name="total", value="3"),
                TextContent("note"),
                Option(value="stray", selected=True),
                OptGroup(options=[Option(value="stray")]),
            ]
        )

        assert values == {}


class TestFormValues:
    def test_add_and_set(self) -> None:
        values = FormValues()
        values.add("a", "1")
        values.add("a", "2")
        values.set("b", "3")
        values.set("b", "4")

        assert values == {"a": ["1", "2"], "b": ["4"]}

    def test_get_first(self) -> None:
        values = FormValues({"a": ["1", "2"]})

        assert values.get_first("a") == "1"
        assert values.get_first("missing") is None
        assert values.get_first("missing", "") == ""

    def test_encode(self) -> None:
        values = FormValues()
        values.add("tags", "x y")
        values.add("tags", "z")
        values.set("q", "a&b")

        assert values.encode() == "tags=x+y&tags=z&q=a%26b"

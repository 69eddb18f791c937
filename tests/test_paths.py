"""Tests for JsonPath: immutability and rendering."""

from __future__ import annotations

import dataclasses

import pytest

from json_pattern_match.paths import FieldStep, IndexStep, JsonPath


class TestRender:
    def test_root_renders_dollar(self) -> None:
        assert JsonPath.root().render() == "$"

    def test_field_step(self) -> None:
        assert JsonPath.root().child_field("a").render() == "$.a"

    def test_index_step(self) -> None:
        assert JsonPath.root().child_index(3).render() == "$[3]"

    def test_deep_mixed_path(self) -> None:
        path = (
            JsonPath.root()
            .child_field("obj1")
            .child_field("array1")
            .child_index(1)
            .child_field("array2")
            .child_index(0)
            .child_index(0)
            .child_field("expected")
        )
        assert path.render() == "$.obj1.array1[1].array2[0][0].expected"

    def test_str_is_render(self) -> None:
        path = JsonPath.root().child_field("x").child_index(0)
        assert str(path) == path.render() == "$.x[0]"

    @pytest.mark.parametrize(
        ("name", "rendered"),
        [
            ("user_id", "$.user_id"),
            ("a.b", "$['a.b']"),
            ("", "$['']"),
            ("...", "$['...']"),
            ("first name", "$['first name']"),
            ("x[0]", "$['x[0]']"),
            ("content-type", "$['content-type']"),
            ("it's", "$['it\\'s']"),
            ("1st", "$['1st']"),
        ],
    )
    def test_non_identifier_keys_are_quoted(self, name: str, rendered: str) -> None:
        assert JsonPath.root().child_field(name).render() == rendered

    def test_quoted_key_inside_path(self) -> None:
        path = JsonPath.root().child_field("a.b").child_index(0).child_field("c")
        assert path.render() == "$['a.b'][0].c"


class TestImmutability:
    def test_child_does_not_mutate_parent(self) -> None:
        parent = JsonPath.root().child_field("a")
        parent.child_field("b")
        parent.child_index(0)
        assert parent.render() == "$.a"

    def test_siblings_are_independent(self) -> None:
        parent = JsonPath.root().child_field("list")
        first = parent.child_index(0)
        second = parent.child_index(1)
        assert first.render() == "$.list[0]"
        assert second.render() == "$.list[1]"

    def test_frozen(self) -> None:
        path = JsonPath.root()
        with pytest.raises(dataclasses.FrozenInstanceError):
            path.steps = (FieldStep("a"),)  # type: ignore[misc]

    def test_child_accepts_either_step(self) -> None:
        path = JsonPath.root().child(FieldStep("a")).child(IndexStep(2))
        assert path.steps == (FieldStep("a"), IndexStep(2))
        assert path.depth == 2

    def test_equal_paths_compare_equal(self) -> None:
        assert JsonPath.root().child_field("a") == JsonPath.root().child_field("a")

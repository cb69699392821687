"""Tests for the ``>>`` pipeline spelling."""

from __future__ import annotations

from dataclasses import dataclass

from convenient_operators.core.copy_policy import SHALLOW_POLICY
from convenient_operators.sugar import Step, apply_copy, apply_reference


class Button:
    def __init__(self) -> None:
        self.title = ""
        self.items: list[str] = []


@dataclass(frozen=True)
class Context:
    name: str = ""


def _set_title(button) -> None:
    button.title = "Done"


def test_reference_step_returns_same_object():
    button = Button()
    result = button >> apply_reference(_set_title)
    assert result is button
    assert button.title == "Done"


def test_new_object_configured_inline():
    button = Button() >> apply_reference(_set_title)
    assert button.title == "Done"


def test_copy_step_leaves_original():
    original = Context(name="")
    updated = original >> apply_copy(lambda c: setattr(c, "name", "Garry"))
    assert updated == Context(name="Garry")
    assert original == Context(name="")


def test_copy_step_forwards_policy():
    button = Button()
    button >> apply_copy(lambda b: b.items.append("x"), policy=SHALLOW_POLICY)
    assert button.items == ["x"]


def test_if_present_step_skips_none():
    called = []
    assert (None >> apply_reference(called.append, if_present=True)) is None
    assert (None >> apply_copy(called.append, if_present=True)) is None
    assert called == []


def test_if_present_step_runs_on_value():
    button = Button()
    assert (button >> apply_reference(_set_title, if_present=True)) is button
    assert button.title == "Done"


def test_step_is_callable():
    step = apply_copy(lambda c: setattr(c, "name", "x"))
    assert step(Context()) == Context(name="x")


def test_step_works_with_ints():
    assert (5 >> apply_copy(lambda v: None)) == 5


def test_factories_build_expected_steps():
    assert apply_reference(_set_title) == Step(_set_title)
    assert apply_copy(_set_title, if_present=True) == Step(_set_title, copy=True, if_present=True)

"""The package root re-exports the whole public surface."""

from __future__ import annotations

import convenient_operators


def test_version():
    assert convenient_operators.__version__ == "1.0.2"


def test_all_names_resolve():
    missing = [name for name in convenient_operators.__all__ if not hasattr(convenient_operators, name)]
    assert missing == []


def test_label_scenarios_through_package_root():
    class UILabelMock:
        def __init__(self) -> None:
            self.text = "Original"

    label = UILabelMock()
    same = convenient_operators.perform_after_reference(label, lambda l: setattr(l, "text", "New"))
    assert same is label
    assert label.text == "New"

    record = {"text": "Original"}
    updated = convenient_operators.perform_after_copy(record, lambda r: r.update(text="New"))
    assert updated["text"] == "New"
    assert record["text"] == "Original"

import pytest

from geantcad.shortcuts import Shortcut, default_shortcuts, filter_shortcuts


def test_default_shortcuts_contains_save():
    entries = default_shortcuts()
    assert Shortcut("File", "Save", "Ctrl+S", "Save current project") in entries


def test_default_shortcuts_first_and_last():
    entries = default_shortcuts()
    assert entries[0].action == "New Project"
    assert entries[-1].shortcut == "Ctrl+,"


def test_default_shortcuts_returns_fresh_list():
    first = default_shortcuts()
    first.clear()
    assert len(default_shortcuts()) > 0


def test_empty_filter_returns_everything_in_order():
    entries = default_shortcuts()
    assert filter_shortcuts(entries, "") == entries


def test_filter_is_case_insensitive_on_shortcut():
    result = filter_shortcuts(default_shortcuts(), "ctrl+s")
    assert [s.action for s in result] == ["Save", "Save As"]


def test_filter_matches_category():
    result = filter_shortcuts(default_shortcuts(), "CONSTRAINT")
    assert [s.shortcut for s in result] == ["X", "Y", "Z"]


def test_filter_result_is_subset_preserving_order():
    entries = default_shortcuts()
    result = filter_shortcuts(entries, "camera")
    positions = [entries.index(s) for s in result]
    assert positions == sorted(positions)
    assert all(
        "camera" in " ".join((s.category, s.action, s.shortcut, s.description)).lower()
        for s in result
    )
    assert len(result) >= 2


def test_filter_without_match_is_empty():
    assert filter_shortcuts(default_shortcuts(), "no such shortcut here") == []


@pytest.mark.parametrize("text", ["Undo", "undo", "UNDO last"])
def test_shortcut_matches(text):
    entry = Shortcut("Edit", "Undo", "Ctrl+Z", "Undo last action")
    assert entry.matches(text) is True


def test_shortcut_does_not_match_other_text():
    entry = Shortcut("Edit", "Undo", "Ctrl+Z", "Undo last action")
    assert entry.matches("redo") is False
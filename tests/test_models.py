"""Tests for mdtoc.models."""

from __future__ import annotations

import dataclasses

import pytest

from mdtoc.models import HeadingRecord


def _heading() -> HeadingRecord:
    return HeadingRecord(level=3, title="A Title to Remember", anchor="#a-title-to-remember")


def test_promote_moves_up_one_level() -> None:
    assert _heading().promote().level == 2


def test_promote_floor_is_one() -> None:
    assert _heading().promote().promote().promote().promote().level == 1


def test_demote_moves_down_one_level() -> None:
    assert _heading().demote().level == 4


def test_demote_ceiling_is_six() -> None:
    assert _heading().demote().demote().demote().demote().level == 6


def test_transforms_keep_title_and_anchor() -> None:
    promoted = _heading().promote()
    assert promoted.title == "A Title to Remember"
    assert promoted.anchor == "#a-title-to-remember"


def test_display_renders_markdown_link() -> None:
    assert str(_heading()) == "[A Title to Remember](#a-title-to-remember)"


def test_records_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        _heading().level = 1  # type: ignore[misc]


@pytest.mark.parametrize("level", [0, 7])
def test_level_outside_range_is_rejected(level: int) -> None:
    with pytest.raises(ValueError):
        HeadingRecord(level=level, title="x", anchor="#x")

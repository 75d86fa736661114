import dataclasses

import pytest

from chartstyle.anchor import HPos, Pos, VPos


def test_default_is_top_left():
    assert Pos() == Pos(HPos.LEFT, VPos.TOP)


def test_fields_keep_values():
    pos = Pos(HPos.CENTER, VPos.BOTTOM)
    assert pos.h_pos is HPos.CENTER
    assert pos.v_pos is VPos.BOTTOM


def test_positions_are_hashable_and_distinct():
    positions = {Pos(h, v) for h in HPos for v in VPos}
    assert len(positions) == len(HPos) * len(VPos)


def test_pos_is_immutable():
    pos = Pos()
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.h_pos = HPos.RIGHT
    assert pos.h_pos is HPos.LEFT
    assert pos == Pos(HPos.LEFT, VPos.TOP)


def test_replace_changes_one_axis():
    pos = dataclasses.replace(Pos(), v_pos=VPos.CENTER)
    assert pos == Pos(HPos.LEFT, VPos.CENTER)
import dataclasses

import pytest

from rterm.core.glyph import Glyph


def test_defaults_to_unwritten_white_on_transparent() -> None:
    glyph = Glyph()
    assert glyph.char == "\0"
    assert glyph.foreground == (1.0, 1.0, 1.0, 1.0)
    assert glyph.background == (0.0, 0.0, 0.0, 0.0)
    assert glyph.is_terminator


@pytest.mark.parametrize("char", ["", "ab"])
def test_rejects_anything_but_one_character(char: str) -> None:
    with pytest.raises(ValueError):
        Glyph(char)


def test_is_immutable() -> None:
    glyph = Glyph("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        glyph.char = "b"


def test_terminators() -> None:
    assert Glyph("\n").is_terminator
    assert not Glyph(" ").is_terminator
    assert not Glyph("a").is_terminator

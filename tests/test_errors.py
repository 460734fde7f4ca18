import pytest

from sculk.errors import (
    InvalidFieldError,
    MissingFieldError,
    NbtError,
    NoNbtError,
    SculkParseError,
    UnsupportedBlockEntityError,
)


def test_missing_field_keeps_name():
    err = MissingFieldError("x")
    assert err.field == "x"
    assert "x" in str(err)


def test_invalid_field_keeps_name():
    err = InvalidFieldError("pos")
    assert err.field == "pos"
    assert "pos" in str(err)


def test_unsupported_block_entity_keeps_id():
    err = UnsupportedBlockEntityError("minecraft:stone")
    assert err.block_entity_id == "minecraft:stone"
    assert "minecraft:stone" in str(err)


@pytest.mark.parametrize(
    "error",
    [MissingFieldError("a"), InvalidFieldError("b"), NoNbtError(), NbtError("bad"), UnsupportedBlockEntityError("c")],
)
def test_all_errors_caught_as_base(error):
    with pytest.raises(SculkParseError) as info:
        raise error
    assert info.value is error


def test_no_nbt_default_message():
    assert str(NoNbtError()) == "no NBT data"
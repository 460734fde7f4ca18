"""Exceptions raised while parsing NBT data into block entities."""

from __future__ import annotations


class SculkParseError(Exception):
    """Base class for every parsing error raised by the package."""


class MissingFieldError(SculkParseError):
    """A required field is absent or has the wrong tag type."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing field: {field}")
        self.field = field


class InvalidFieldError(SculkParseError):
    """A field is present but its contents cannot be used."""

    def __init__(self, field: str) -> None:
        super().__init__(f"invalid field: {field}")
        self.field = field


class NoNbtError(SculkParseError):
    """The input holds no NBT root compound."""

    def __init__(self, message: str = "no NBT data") -> None:
        super().__init__(message)


class NbtError(SculkParseError):
    """The binary NBT data is malformed or cannot be encoded."""


class UnsupportedBlockEntityError(SculkParseError):
    """The block entity id is not one the package knows how to parse."""

    def __init__(self, block_entity_id: str) -> None:
        super().__init__(f"unsupported block entity: {block_entity_id}")
        self.block_entity_id = block_entity_id
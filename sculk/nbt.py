"""Reading and writing uncompressed binary NBT (big-endian, Java edition)."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .errors import NbtError

MAX_DEPTH = 512


class TagType(IntEnum):
    """Identifiers of the NBT tag types."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


@dataclass(frozen=True)
class Tag:
    """A typed NBT value stored under a name in a compound."""

    type: TagType
    value: Any


@dataclass
class NbtList:
    """An NBT list: values that all share one tag type."""

    element_type: TagType = TagType.END
    items: list = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def _typed(self, tag_type: TagType) -> list | None:
        if not self.items:
            return []
        if self.element_type != tag_type:
            return None
        return list(self.items)

    def compounds(self) -> list[Compound] | None:
        """The elements as compounds, or None if the list holds another type."""
        return self._typed(TagType.COMPOUND)

    def strings(self) -> list[str] | None:
        """The elements as strings, or None if the list holds another type."""
        return self._typed(TagType.STRING)


class Compound(dict):
    """An NBT compound: a mapping of names to tags."""

    def _value(self, name: str, tag_type: TagType) -> Any:
        tag = self.get(name)
        if tag is None or tag.type != tag_type:
            return None
        return tag.value

    def get_byte(self, name: str) -> int | None:
        return self._value(name, TagType.BYTE)

    def get_short(self, name: str) -> int | None:
        return self._value(name, TagType.SHORT)

    def get_int(self, name: str) -> int | None:
        return self._value(name, TagType.INT)

    def get_long(self, name: str) -> int | None:
        return self._value(name, TagType.LONG)

    def get_float(self, name: str) -> float | None:
        return self._value(name, TagType.FLOAT)

    def get_double(self, name: str) -> float | None:
        return self._value(name, TagType.DOUBLE)

    def get_string(self, name: str) -> str | None:
        return self._value(name, TagType.STRING)

    def get_compound(self, name: str) -> Compound | None:
        return self._value(name, TagType.COMPOUND)

    def get_list(self, name: str) -> NbtList | None:
        return self._value(name, TagType.LIST)

    def get_byte_array(self, name: str) -> bytes | None:
        return self._value(name, TagType.BYTE_ARRAY)

    def get_int_array(self, name: str) -> list[int] | None:
        return self._value(name, TagType.INT_ARRAY)

    def get_long_array(self, name: str) -> list[int] | None:
        return self._value(name, TagType.LONG_ARRAY)


_UBYTE = struct.Struct(">B")
_USHORT = struct.Struct(">H")
_INT = struct.Struct(">i")
_SCALARS = {
    TagType.BYTE: struct.Struct(">b"),
    TagType.SHORT: struct.Struct(">h"),
    TagType.INT: _INT,
    TagType.LONG: struct.Struct(">q"),
    TagType.FLOAT: struct.Struct(">f"),
    TagType.DOUBLE: struct.Struct(">d"),
}


def _decode_mutf8(raw: bytes) -> str:
    try:
        text = raw.replace(b"\xc0\x80", b"\x00").decode("utf-8", "surrogatepass")
    except UnicodeDecodeError as exc:
        raise NbtError("invalid string encoding") from exc
    if any("\ud800" <= ch <= "\udfff" for ch in text):
        text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return text


def _encode_mutf8(text: str) -> bytes:
    if text.isascii() and "\x00" not in text:
        return text.encode("ascii")
    out = bytearray()
    for ch in text:
        code = ord(ch)
        if code == 0:
            out += b"\xc0\x80"
        elif code > 0xFFFF:
            code -= 0x10000
            for unit in (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)):
                out += chr(unit).encode("utf-8", "surrogatepass")
        else:
            out += ch.encode("utf-8", "surrogatepass")
    return bytes(out)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if size < 0 or end > len(self._data):
            raise NbtError("unexpected end of data")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, fmt: struct.Struct) -> Any:
        return fmt.unpack(self.take(fmt.size))[0]

    def tag_type(self) -> TagType:
        raw = self.unpack(_UBYTE)
        try:
            return TagType(raw)
        except ValueError as exc:
            raise NbtError(f"unknown tag type {raw}") from exc

    def length(self) -> int:
        size = self.unpack(_INT)
        if size < 0:
            raise NbtError("negative length")
        return size

    def string(self) -> str:
        return _decode_mutf8(self.take(self.unpack(_USHORT)))

    def value(self, tag_type: TagType, depth: int) -> Any:
        if depth > MAX_DEPTH:
            raise NbtError("maximum nesting depth exceeded")
        scalar = _SCALARS.get(tag_type)
        if scalar is not None:
            return self.unpack(scalar)
        if tag_type == TagType.BYTE_ARRAY:
            return self.take(self.length())
        if tag_type == TagType.STRING:
            return self.string()
        if tag_type == TagType.LIST:
            element_type = self.tag_type()
            size = self.length()
            if size and element_type == TagType.END:
                raise NbtError("non-empty list of end tags")
            return NbtList(element_type, [self.value(element_type, depth + 1) for _ in range(size)])
        if tag_type == TagType.COMPOUND:
            compound = Compound()
            while (child_type := self.tag_type()) != TagType.END:
                name = self.string()
                compound[name] = Tag(child_type, self.value(child_type, depth + 1))
            return compound
        if tag_type in (TagType.INT_ARRAY, TagType.LONG_ARRAY):
            size = self.length()
            code = "i" if tag_type == TagType.INT_ARRAY else "q"
            fmt = struct.Struct(f">{size}{code}")
            return list(fmt.unpack(self.take(fmt.size)))
        raise NbtError(f"unexpected tag type {tag_type!r}")


def read_nbt(data: bytes) -> Compound | None:
    """Parse binary NBT; returns None when the root is an end tag."""
    reader = _Reader(data)
    root_type = reader.tag_type()
    if root_type == TagType.END:
        return None
    if root_type != TagType.COMPOUND:
        raise NbtError("root tag is not a compound")
    reader.string()
    return reader.value(TagType.COMPOUND, 1)


def _write_string(out: bytearray, text: str) -> None:
    raw = _encode_mutf8(text)
    if len(raw) > 0xFFFF:
        raise NbtError("string too long")
    out += _USHORT.pack(len(raw))
    out += raw


def _write_value(out: bytearray, tag_type: TagType, value: Any) -> None:
    scalar = _SCALARS.get(tag_type)
    if scalar is not None:
        out += scalar.pack(value)
    elif tag_type == TagType.BYTE_ARRAY:
        raw = bytes(value)
        out += _INT.pack(len(raw))
        out += raw
    elif tag_type == TagType.STRING:
        _write_string(out, value)
    elif tag_type == TagType.LIST:
        if value.items and value.element_type == TagType.END:
            raise NbtError("non-empty list of end tags")
        out += _UBYTE.pack(value.element_type)
        out += _INT.pack(len(value.items))
        for item in value.items:
            _write_value(out, value.element_type, item)
    elif tag_type == TagType.COMPOUND:
        for name, tag in value.items():
            out += _UBYTE.pack(tag.type)
            _write_string(out, name)
            _write_value(out, tag.type, tag.value)
        out.append(TagType.END)
    elif tag_type in (TagType.INT_ARRAY, TagType.LONG_ARRAY):
        code = "i" if tag_type == TagType.INT_ARRAY else "q"
        out += _INT.pack(len(value))
        out += struct.pack(f">{len(value)}{code}", *value)
    else:
        raise NbtError(f"cannot write tag of type {tag_type!r}")


def write_nbt(compound: Compound, name: str = "") -> bytes:
    """Encode a compound as a named binary NBT root."""
    out = bytearray([TagType.COMPOUND])
    try:
        _write_string(out, name)
        _write_value(out, TagType.COMPOUND, compound)
    except (struct.error, TypeError, AttributeError) as exc:
        raise NbtError(f"cannot encode value: {exc}") from exc
    return bytes(out)
"""Charsets describe the pool of candidate tokens a Randomizer samples from.

Each variant resolves to a flat list of tokens, every token a ``bytes`` value
that is appended whole. Text variants split on character (or item)
boundaries so any concatenation of tokens is valid UTF-8.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from randomizer import alphabets

ENCODING = "utf-8"

# Values 0..254; 255 is not part of the default byte pool.
ANY_BYTE_VALUES = range(255)


class SingleText(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["single_text"] = "single_text"
    text: str


class TextSet(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["text_set"] = "text_set"
    items: tuple[str, ...]


class FixedBytes(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["fixed_bytes"] = "fixed_bytes"
    data: bytes


class ByteGroups(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["byte_groups"] = "byte_groups"
    groups: tuple[bytes, ...]


class AnyByte(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["any_byte"] = "any_byte"


class AnyText(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["any_text"] = "any_text"


Charset = Annotated[
    SingleText | TextSet | FixedBytes | ByteGroups | AnyByte | AnyText,
    Field(discriminator="kind"),
]

_CHARSET_TYPES = (SingleText, TextSet, FixedBytes, ByteGroups, AnyByte, AnyText)


def _text_tokens(text: str) -> list[bytes]:
    return [ch.encode(ENCODING) for ch in text]


def resolve_tokens(charset: Charset) -> list[bytes]:
    """Flatten a charset into its ordered list of candidate tokens."""
    match charset:
        case SingleText(text=text):
            return _text_tokens(text)
        case TextSet(items=items):
            return [item.encode(ENCODING) for item in items]
        case FixedBytes(data=data):
            return [bytes([b]) for b in data]
        case ByteGroups(groups=groups):
            return list(groups)
        case AnyByte():
            return [bytes([b]) for b in ANY_BYTE_VALUES]
        case AnyText():
            return _text_tokens(alphabets.UTF8)
        case _:
            raise ValueError(f"Unknown charset: {charset!r}")


def _is_utf8(data: bytes) -> bool:
    try:
        data.decode(ENCODING)
    except UnicodeDecodeError:
        return False
    return True


def is_text_safe(charset: Charset) -> bool:
    """Return True when every token of charset is valid UTF-8 on its own.

    Only text-safe charsets can be measured by character count.
    """
    match charset:
        case SingleText() | TextSet() | AnyText():
            return True
        case FixedBytes(data=data):
            return data.isascii()
        case ByteGroups(groups=groups):
            return all(_is_utf8(group) for group in groups)
        case AnyByte():
            return False
        case _:
            raise ValueError(f"Unknown charset: {charset!r}")


def to_charset(value: Any) -> Charset:
    """Coerce a convenience value into a Charset.

    ``None`` selects AnyByte, ``str`` a SingleText, ``bytes`` a FixedBytes,
    a sequence of ``str`` a TextSet and a sequence of ``bytes`` ByteGroups.
    """
    if value is None:
        return AnyByte()
    if isinstance(value, _CHARSET_TYPES):
        return value
    if isinstance(value, str):
        return SingleText(text=value)
    if isinstance(value, (bytes, bytearray)):
        return FixedBytes(data=bytes(value))
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, str) for item in value):
            return TextSet(items=tuple(value))
        if all(isinstance(item, (bytes, bytearray)) for item in value):
            return ByteGroups(groups=tuple(bytes(item) for item in value))
        raise TypeError(
            "charset sequence must contain only str or only bytes items"
        )
    raise TypeError(f"Cannot build a charset from {type(value).__name__}")

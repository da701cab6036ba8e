"""randomizer: random text and bytes sampled from configurable charsets."""

from randomizer.block import RandomBlock
from randomizer.charset import (
    AnyByte,
    AnyText,
    ByteGroups,
    Charset,
    FixedBytes,
    SingleText,
    TextSet,
    resolve_tokens,
    to_charset,
)
from randomizer.engine import LengthPolicy, Randomizer, measure_progress
from randomizer.errors import (
    CharsetMismatchError,
    InvalidEncodingError,
    OverflowUnderflowError,
    RandomizerError,
)
from randomizer.presets import get_preset, get_preset_names

__all__ = [
    "AnyByte",
    "AnyText",
    "ByteGroups",
    "Charset",
    "CharsetMismatchError",
    "FixedBytes",
    "InvalidEncodingError",
    "LengthPolicy",
    "OverflowUnderflowError",
    "RandomBlock",
    "Randomizer",
    "RandomizerError",
    "SingleText",
    "TextSet",
    "get_preset",
    "get_preset_names",
    "measure_progress",
    "resolve_tokens",
    "to_charset",
]

"""Literal alphabets used by the named presets and the AnyText charset."""

import string

NUMERICAL = string.digits
ALPHABETICAL_LOWER = string.ascii_lowercase
ALPHABETICAL_UPPER = string.ascii_uppercase
ALPHABETICAL = string.ascii_letters
ALPHANUMERIC_LOWER = string.ascii_lowercase + string.digits
ALPHANUMERIC_UPPER = string.ascii_uppercase + string.digits
ALPHANUMERIC = string.ascii_letters + string.digits

# Inclusive code point ranges, grouped by UTF-8 width.
_UTF8_RANGES = (
    # 1 byte: printable ASCII without space
    (0x21, 0x7E),
    # 2 bytes: Latin-1 letters, Greek, Cyrillic
    (0xC0, 0xFF),
    (0x391, 0x3A1),
    (0x3A3, 0x3A9),
    (0x3B1, 0x3C9),
    (0x410, 0x44F),
    # 3 bytes: miscellaneous symbols, hiragana, CJK
    (0x2600, 0x26FF),
    (0x3041, 0x3096),
    (0x4E00, 0x4E7F),
    # 4 bytes: emoticons
    (0x1F600, 0x1F64F),
)

UTF8 = "".join(
    chr(code_point)
    for low, high in _UTF8_RANGES
    for code_point in range(low, high + 1)
)

"""Named Randomizer presets over fixed alphabets.

Every preset uses a SingleText charset, so its output is always valid text
and the default STEPS policy yields exactly ``length`` characters.
"""

from collections.abc import Callable

from randomizer import alphabets
from randomizer.charset import SingleText
from randomizer.engine import Randomizer


def _from_alphabet(alphabet: str, length: int) -> Randomizer:
    return Randomizer.new(length, SingleText(text=alphabet))


def alphanumeric(length: int) -> Randomizer:
    return _from_alphabet(alphabets.ALPHANUMERIC, length)


def alphanumeric_lower(length: int) -> Randomizer:
    return _from_alphabet(alphabets.ALPHANUMERIC_LOWER, length)


def alphanumeric_upper(length: int) -> Randomizer:
    return _from_alphabet(alphabets.ALPHANUMERIC_UPPER, length)


def alphabetical(length: int) -> Randomizer:
    return _from_alphabet(alphabets.ALPHABETICAL, length)


def alphabetical_lower(length: int) -> Randomizer:
    return _from_alphabet(alphabets.ALPHABETICAL_LOWER, length)


def alphabetical_upper(length: int) -> Randomizer:
    return _from_alphabet(alphabets.ALPHABETICAL_UPPER, length)


def numerical(length: int) -> Randomizer:
    return _from_alphabet(alphabets.NUMERICAL, length)


def utf8(length: int) -> Randomizer:
    """Unrestricted text drawn from the broad built-in alphabet."""
    return _from_alphabet(alphabets.UTF8, length)


PRESETS: dict[str, Callable[[int], Randomizer]] = {
    "alphanumeric": alphanumeric,
    "alphanumeric_lower": alphanumeric_lower,
    "alphanumeric_upper": alphanumeric_upper,
    "alphabetical": alphabetical,
    "alphabetical_lower": alphabetical_lower,
    "alphabetical_upper": alphabetical_upper,
    "numerical": numerical,
    "utf8": utf8,
}


def get_preset_names() -> list[str]:
    """Return valid preset names."""
    return sorted(PRESETS)


def get_preset(name: str, length: int) -> Randomizer:
    """Return the preset Randomizer called name.

    Raises:
        ValueError: If name is not a known preset.
    """
    preset = PRESETS.get(name)
    if preset is None:
        raise ValueError(
            f"Unknown preset '{name}'. Valid: {get_preset_names()}"
        )
    return preset(length)

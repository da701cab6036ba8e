import random
import string

import pytest

from randomizer import alphabets
from randomizer.charset import SingleText
from randomizer.engine import LengthPolicy, Randomizer
from randomizer.presets import (
    PRESETS,
    alphabetical_lower,
    alphanumeric,
    get_preset,
    get_preset_names,
    numerical,
    utf8,
)


class TestPresets:
    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_preset_generates_requested_characters(self, name: str) -> None:
        randomizer = get_preset(name, 12)
        assert isinstance(randomizer, Randomizer)
        assert isinstance(randomizer.charset, SingleText)
        assert randomizer.limit_mode == LengthPolicy.STEPS
        text = randomizer.to_text(random.Random(0))
        assert len(text) == 12
        assert set(text) <= set(randomizer.charset.text)

    def test_alphanumeric_alphabet(self) -> None:
        assert alphanumeric(1).charset == SingleText(
            text=string.ascii_letters + string.digits
        )

    def test_alphabetical_lower_only_lowercase(self) -> None:
        text = alphabetical_lower(50).to_text(random.Random(1))
        assert text.islower()
        assert text.isalpha()

    def test_numerical_only_digits(self) -> None:
        assert numerical(20).to_text(random.Random(2)).isdigit()

    def test_utf8_spans_multiple_byte_widths(self) -> None:
        assert utf8(1).charset == SingleText(text=alphabets.UTF8)
        widths = {len(ch.encode()) for ch in alphabets.UTF8}
        assert widths == {1, 2, 3, 4}

    def test_get_preset_names(self) -> None:
        assert get_preset_names() == [
            "alphabetical",
            "alphabetical_lower",
            "alphabetical_upper",
            "alphanumeric",
            "alphanumeric_lower",
            "alphanumeric_upper",
            "numerical",
            "utf8",
        ]

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Unknown preset 'hex'"):
            get_preset("hex", 4)

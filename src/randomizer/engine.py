import logging
import random
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from randomizer.block import RandomBlock
from randomizer.charset import (
    ENCODING,
    AnyByte,
    Charset,
    is_text_safe,
    resolve_tokens,
    to_charset,
)
from randomizer.errors import (
    CharsetMismatchError,
    InvalidEncodingError,
    OverflowUnderflowError,
)
from randomizer.trace import TraceStep, trace_step

logger = logging.getLogger(__name__)


class LengthPolicy(str, Enum):
    BYTES = "bytes"
    CHARACTERS = "characters"
    STEPS = "steps"


def _coerce_separator(value: Any) -> bytes | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.encode(ENCODING)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(
        f"separator must be str or bytes, got {type(value).__name__}"
    )


def measure_progress(
    policy: LengthPolicy, progress: int, buffer: bytes | bytearray
) -> int:
    """Return the progress of buffer toward the target under policy.

    STEPS ignores the buffer and counts one more append. CHARACTERS decodes
    the whole buffer and raises InvalidEncodingError when it is not UTF-8.
    """
    match policy:
        case LengthPolicy.BYTES:
            return len(buffer)
        case LengthPolicy.CHARACTERS:
            # Decodes the whole buffer each call: quadratic in output length.
            try:
                return len(bytes(buffer).decode(ENCODING))
            except UnicodeDecodeError as exc:
                raise InvalidEncodingError(exc) from exc
        case LengthPolicy.STEPS:
            return progress + 1
        case _:
            raise ValueError(
                f"Unknown LengthPolicy: {policy!r}; expected one of "
                f"{list(LengthPolicy)}"
            )


class Randomizer(BaseModel):
    """Builder for random strings or bytes.

    The charset is resolved into tokens (characters, words, bytes or byte
    groups) and tokens are drawn with replacement until ``length`` is reached
    under ``limit_mode``. A separator, when set, is inserted between tokens
    but never after the token that reaches the target.

    >>> Randomizer.new(6, "u").to_text()
    'uuuuuu'
    >>> Randomizer.new_with_separator(6, "u", " ").to_text()
    'u u u u u u'
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(ge=0)
    charset: Charset = Field(default_factory=AnyByte)
    separator: bytes | None = None
    limit_mode: LengthPolicy = LengthPolicy.STEPS

    @field_validator("charset", mode="before")
    @classmethod
    def coerce_charset(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value
        return to_charset(value)

    @field_validator("separator", mode="before")
    @classmethod
    def coerce_separator(cls, value: Any) -> bytes | None:
        return _coerce_separator(value)

    @classmethod
    def new(cls, length: int, charset: Any = None) -> "Randomizer":
        return cls(length=length, charset=to_charset(charset))

    @classmethod
    def new_with_separator(
        cls, length: int, charset: Any, separator: str | bytes
    ) -> "Randomizer":
        return cls(
            length=length,
            charset=to_charset(charset),
            separator=_coerce_separator(separator),
        )

    def with_charset(self, charset: Any) -> "Randomizer":
        return self.model_copy(update={"charset": to_charset(charset)})

    def with_separator(self, separator: str | bytes | None) -> "Randomizer":
        return self.model_copy(
            update={"separator": _coerce_separator(separator)}
        )

    def with_limit_mode(self, mode: LengthPolicy | str) -> "Randomizer":
        return self.model_copy(update={"limit_mode": LengthPolicy(mode)})

    def _check_pool(self, tokens: list[bytes]) -> None:
        if not tokens:
            raise OverflowUnderflowError(
                "charset resolved to an empty token pool"
            )
        if self.limit_mode == LengthPolicy.STEPS:
            return
        if self.length > 0 and not any(tokens):
            raise OverflowUnderflowError(
                "every token in the pool is empty; "
                f"{self.limit_mode.value} progress cannot advance"
            )
        if self.limit_mode == LengthPolicy.CHARACTERS and not is_text_safe(
            self.charset
        ):
            raise CharsetMismatchError(
                f"{self.charset.kind} charset cannot be measured in characters"
            )

    def generate(
        self,
        rng: random.Random | None = None,
        trace: list[TraceStep] | None = None,
    ) -> RandomBlock:
        """Run the sampling loop and return the assembled block.

        Raises OverflowUnderflowError when the pool is empty or a drawn
        index does not resolve, InvalidEncodingError when a CHARACTERS
        measurement fails, and CharsetMismatchError when the charset cannot
        produce text under CHARACTERS.
        """
        if rng is None:
            rng = random.Random()

        tokens = resolve_tokens(self.charset)
        self._check_pool(tokens)

        buffer = bytearray()
        progress = 0
        draws = 0
        while progress < self.length:
            index = rng.randrange(len(tokens))
            if not 0 <= index < len(tokens):
                raise OverflowUnderflowError(
                    f"drawn index {index} is outside the pool of "
                    f"{len(tokens)} tokens"
                )
            token = tokens[index]
            buffer.extend(token)
            progress = measure_progress(self.limit_mode, progress, buffer)
            trace_step(
                trace,
                f"draw_{draws}",
                f"Token {index} of {len(tokens)}",
                token.hex(),
            )
            draws += 1

            if self.separator is not None and progress < self.length:
                buffer.extend(self.separator)
                if self.limit_mode != LengthPolicy.STEPS:
                    progress = measure_progress(
                        self.limit_mode, progress, buffer
                    )
                trace_step(
                    trace,
                    f"separator_{draws - 1}",
                    f"Separator after token {draws - 1}",
                    self.separator.hex(),
                )

        logger.debug(
            "generated %d tokens, %d bytes (%s progress %d/%d)",
            draws, len(buffer), self.limit_mode.value, progress, self.length,
        )
        return RandomBlock(inner=bytes(buffer))

    def to_text(self, rng: random.Random | None = None) -> str:
        return self.generate(rng).to_text()

    def to_bytes(self, rng: random.Random | None = None) -> bytes:
        return self.generate(rng).to_bytes()

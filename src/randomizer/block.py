from pydantic import BaseModel, ConfigDict

from randomizer.charset import ENCODING
from randomizer.errors import InvalidEncodingError


class RandomBlock(BaseModel):
    """Bytes assembled by one generation run.

    Converting to bytes always succeeds. Converting to text fails with
    InvalidEncodingError when the bytes are not valid UTF-8, which is
    expected for byte-level charsets.
    """

    model_config = ConfigDict(frozen=True)

    inner: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> "RandomBlock":
        return cls(inner=bytes(data))

    def to_bytes(self) -> bytes:
        return self.inner

    def to_text(self) -> str:
        try:
            return self.inner.decode(ENCODING)
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(exc) from exc

    def __bytes__(self) -> bytes:
        return self.inner

    def __len__(self) -> int:
        return len(self.inner)

"""SOFH frames: a six-byte header followed by the message payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from fixwire.sofh.errors import IncompleteError, InvalidMessageLengthError

HEADER_SIZE_IN_BYTES = 6
MAX_MESSAGE_SIZE_IN_BYTES = 0xFFFFFFFF - HEADER_SIZE_IN_BYTES


@dataclass(frozen=True)
class Frame:
    """A SOFH-enclosed message with its 16-bit encoding type."""

    encoding_type: int
    message: bytes

    def __post_init__(self) -> None:
        if len(self.message) > MAX_MESSAGE_SIZE_IN_BYTES:
            raise ValueError("message is too large for a SOFH frame")
        if not 0 <= self.encoding_type <= 0xFFFF:
            raise ValueError("encoding type must fit in 16 bits")
        object.__setattr__(self, "message", bytes(self.message))

    @classmethod
    def decode(cls, data: bytes) -> Frame:
        """Decodes a frame from ``data``, ignoring bytes past its end."""
        if len(data) < HEADER_SIZE_IN_BYTES:
            raise IncompleteError(HEADER_SIZE_IN_BYTES - len(data))
        message_len = int.from_bytes(bytes(data[0:4]), "big")
        if message_len < HEADER_SIZE_IN_BYTES:
            raise InvalidMessageLengthError()
        if len(data) < message_len:
            raise IncompleteError(message_len - len(data))
        encoding_type = int.from_bytes(bytes(data[4:6]), "big")
        return cls(encoding_type, bytes(data[HEADER_SIZE_IN_BYTES:message_len]))

    def encode(self, writer: BinaryIO) -> int:
        """Writes the frame to ``writer`` and returns the number of bytes written."""
        data = self.to_bytes()
        writer.write(data)
        return len(data)

    def to_bytes(self) -> bytes:
        """Returns the frame's wire bytes."""
        total = len(self.message) + HEADER_SIZE_IN_BYTES
        return total.to_bytes(4, "big") + self.encoding_type.to_bytes(2, "big") + self.message
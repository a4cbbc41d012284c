"""Conversion of Python values to and from their FIX field byte representation."""

from __future__ import annotations

import datetime as _dt
import enum
import re
from dataclasses import dataclass


class FixValueError(ValueError):
    """Raised when a FIX field value cannot be (de)serialized."""


class WrongLengthError(FixValueError):
    """The field has a length that its data type does not allow."""


class InvalidCharacterError(FixValueError):
    """The field holds a character that its data type does not allow."""


class InvalidIntError(FixValueError):
    """The field is not a valid integer of the requested kind."""


@dataclass(frozen=True)
class Padding:
    """Fixed-width padding for serialized integers."""

    length: int = 0
    byte: int = 0

    @classmethod
    def zeros(cls, length: int) -> Padding:
        """Left-pads with ASCII ``0`` up to ``length`` digits."""
        return cls(length=length, byte=ord("0"))


class IntKind(enum.Enum):
    """Integer data types with their ranges."""

    TAG = (16, False, 1)
    U32 = (32, False, 0)
    I32 = (32, True, 0)
    U64 = (64, False, 0)
    I64 = (64, True, 0)
    USIZE = (64, False, 0)

    def __init__(self, bits: int, signed: bool, lowest_unsigned: int) -> None:
        self.bits = bits
        self.signed = signed
        if signed:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1
        else:
            self.min_value = lowest_unsigned
            self.max_value = (1 << bits) - 1

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def wrap(self, n: int) -> int:
        """Reduces ``n`` modulo the type width, as two's complement if signed."""
        n &= self.mask
        if self.signed and n >= 1 << (self.bits - 1):
            n -= 1 << self.bits
        return n


_SIGNED_RE = re.compile(rb"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(rb"\+?[0-9]+")


def _serialize_padded(value: int, padding: Padding) -> bytes:
    if value < 0:
        raise FixValueError("padded integers must be non-negative")
    # Only the lowest `length` digits are kept, as in a fixed-width field.
    return f"{value % 10 ** padding.length:0{padding.length}d}".encode("ascii")


def serialize(value: object, padding: Padding | None = None) -> bytes:
    """Returns the FIX byte representation of ``value``."""
    if isinstance(value, bool):
        return b"Y" if value else b"N"
    if isinstance(value, int):
        if padding is not None and padding.length > 0:
            return _serialize_padded(value, padding)
        return str(value).encode("ascii")
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, _dt.datetime):
        return serialize_datetime(value)
    if isinstance(value, _dt.date):
        return serialize_date(value)
    raise TypeError(f"cannot serialize {type(value).__name__} as a FIX value")


def to_string(value: object) -> str:
    """Returns the FIX representation of ``value`` as text."""
    try:
        return serialize(value).decode("utf-8")
    except UnicodeDecodeError as err:
        raise FixValueError("invalid UTF-8 representation of FIX field") from err


def serialize_datetime(value: _dt.datetime, with_milliseconds: bool = True) -> bytes:
    """Serializes a timestamp as ``YYYYMMDD-HH:MM:SS[.sss]`` in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(_dt.timezone.utc)
    zeros2 = Padding.zeros(2)
    parts = [
        _serialize_padded(value.year, Padding.zeros(4)),
        _serialize_padded(value.month, zeros2),
        _serialize_padded(value.day, zeros2),
        b"-",
        _serialize_padded(value.hour, zeros2),
        b":",
        _serialize_padded(value.minute, zeros2),
        b":",
        _serialize_padded(value.second, zeros2),
    ]
    if with_milliseconds:
        parts.append(b".")
        parts.append(_serialize_padded(value.microsecond // 1000, Padding.zeros(3)))
    return b"".join(parts)


def serialize_date(value: _dt.date) -> bytes:
    """Serializes a date as ``YYYYMMDD``."""
    zeros2 = Padding.zeros(2)
    return b"".join(
        (
            _serialize_padded(value.year, Padding.zeros(4)),
            _serialize_padded(value.month, zeros2),
            _serialize_padded(value.day, zeros2),
        )
    )


def deserialize_bool(data: bytes) -> bool:
    """Parses ``Y`` or ``N``."""
    if len(data) != 1:
        raise WrongLengthError("boolean fields must be exactly one byte long")
    if data == b"Y":
        return True
    if data == b"N":
        return False
    raise InvalidCharacterError("boolean fields must be 'Y' or 'N'")


def deserialize_bool_lossy(data: bytes) -> bool:
    """Parses a boolean, treating anything but ``Y`` as false."""
    if len(data) != 1:
        raise WrongLengthError("boolean fields must be exactly one byte long")
    return data[0] == ord("Y")


def deserialize_str(data: bytes) -> str:
    """Decodes UTF-8 text."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as err:
        raise FixValueError("invalid UTF-8 in string field") from err


def deserialize_byte(data: bytes) -> int:
    """Returns the first byte of ``data``."""
    if not data:
        raise WrongLengthError("a single-byte field cannot be empty")
    return data[0]


def deserialize_bytes(data: bytes, length: int | None = None) -> bytes:
    """Returns ``data`` as bytes, checking its length if ``length`` is given."""
    if length is not None and len(data) != length:
        raise WrongLengthError(f"expected {length} bytes, got {len(data)}")
    return bytes(data)


def deserialize_int(data: bytes, kind: IntKind = IntKind.I64) -> int:
    """Strictly parses a decimal integer of the given ``kind``."""
    data = bytes(data)
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidIntError("integer field is not valid UTF-8") from err
    pattern = _SIGNED_RE if kind.signed else _UNSIGNED_RE
    if pattern.fullmatch(data) is None:
        raise InvalidIntError(f"{data!r} is not a valid integer")
    n = int(data)
    if not kind.min_value <= n <= kind.max_value:
        raise InvalidIntError(f"{n} is out of range for {kind.name}")
    return n


def deserialize_int_lossy(data: bytes, kind: IntKind = IntKind.I64) -> int:
    """Parses a decimal integer without validation; bad input gives arbitrary values."""
    data = bytes(data)
    if kind.signed and not data:
        raise InvalidIntError("signed integer field cannot be empty")
    negative = kind.signed and data[:1] == b"-"
    digits = data[1:] if negative else data
    mask = kind.mask
    n = 0
    for byte in digits:
        n = (n * 10 + byte - ord("0")) & mask
    if negative:
        n = -n
    n = kind.wrap(n)
    if n < kind.min_value:
        raise InvalidIntError(f"{n} is out of range for {kind.name}")
    return n
"""SOFH encoding types and their 16-bit wire values."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EncodingKind(enum.Enum):
    """The families of encoding types known to the SOFH specification."""

    PRIVATE = "private"
    SBE10_BE = "sbe10_be"
    SBE10_LE = "sbe10_le"
    PROTOBUF = "protobuf"
    ASN1_PER = "asn1_per"
    ASN1_BER = "asn1_ber"
    ASN1_OER = "asn1_oer"
    TAG_VALUE = "tag_value"
    FIXML_SCHEMA = "fixml_schema"
    FAST = "fast"
    JSON = "json"
    BSON = "bson"
    UNKNOWN = "unknown"


_PRIVATE_START = 0x1
_PRIVATE_END = 0xFF
_FAST_OFFSET = 0xFA00
_FAST_START = _FAST_OFFSET + 0x1
_FAST_END = _FAST_OFFSET + 0xFF

_FIXED_CODES = {
    EncodingKind.PROTOBUF: 0x4700,
    EncodingKind.SBE10_BE: 0x5BE0,
    EncodingKind.ASN1_PER: 0xA500,
    EncodingKind.ASN1_BER: 0xA501,
    EncodingKind.ASN1_OER: 0xA502,
    EncodingKind.SBE10_LE: 0xEB50,
    EncodingKind.TAG_VALUE: 0xF000,
    EncodingKind.FIXML_SCHEMA: 0xF100,
    EncodingKind.JSON: 0xF500,
    EncodingKind.BSON: 0xFB00,
}
_KIND_BY_CODE = {code: kind for kind, code in _FIXED_CODES.items()}


@dataclass(frozen=True, eq=False)
class EncodingType:
    """An encoding type; ``value`` is the parameter of private, FAST and unknown kinds.

    Equality and hashing use the 16-bit wire value, so e.g.
    ``EncodingType(EncodingKind.UNKNOWN, 0xF500)`` equals the JSON type.
    """

    kind: EncodingKind
    value: int = 0

    def __post_init__(self) -> None:
        if self.kind in (EncodingKind.PRIVATE, EncodingKind.FAST):
            if not 0 <= self.value <= 0xFF:
                raise ValueError(f"{self.kind.name} parameter must fit in one byte")
        elif self.kind is EncodingKind.UNKNOWN:
            if not 0 <= self.value <= 0xFFFF:
                raise ValueError("encoding type must fit in 16 bits")
        elif self.value != 0:
            raise ValueError(f"{self.kind.name} takes no parameter")

    @classmethod
    def from_int(cls, value: int) -> EncodingType:
        """Builds an encoding type from its 16-bit value."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError("encoding type must fit in 16 bits")
        if _PRIVATE_START <= value <= _PRIVATE_END:
            return cls(EncodingKind.PRIVATE, value)
        kind = _KIND_BY_CODE.get(value)
        if kind is not None:
            return cls(kind)
        if _FAST_START <= value <= _FAST_END:
            return cls(EncodingKind.FAST, value - _FAST_OFFSET)
        return cls(EncodingKind.UNKNOWN, value)

    @classmethod
    def from_bytes(cls, data: bytes) -> EncodingType:
        """Parses two big-endian bytes."""
        if len(data) != 2:
            raise ValueError("an encoding type is exactly two bytes long")
        return cls.from_int(int.from_bytes(bytes(data), "big"))

    def to_int(self) -> int:
        """Returns the 16-bit wire value."""
        if self.kind in (EncodingKind.PRIVATE, EncodingKind.UNKNOWN):
            return self.value
        if self.kind is EncodingKind.FAST:
            return _FAST_OFFSET + self.value
        return _FIXED_CODES[self.kind]

    def to_bytes(self) -> bytes:
        """Returns the two big-endian wire bytes."""
        return self.to_int().to_bytes(2, "big")

    def __int__(self) -> int:
        return self.to_int()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodingType):
            return NotImplemented
        return self.to_int() == other.to_int()

    def __hash__(self) -> int:
        return hash(self.to_int())
"""A step-by-step encoder for FIX messages in JSON."""

from __future__ import annotations

import json

from fixwire.fix_value import to_string


def _field_name(field: object) -> str:
    name = field if isinstance(field, str) else getattr(field, "name", None)
    if callable(name):
        name = name()
    if not isinstance(name, str):
        raise TypeError("a field must be a name or have a 'name' attribute")
    if not name.isascii():
        raise ValueError(f"field name {name!r} is not ASCII")
    return name


class Encoder:
    """Builds FIX JSON messages section by section."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._has_message = False

    def start_message(self) -> InitialState:
        """Discards any previous message and starts a new one."""
        self._buffer.clear()
        self._has_message = True
        return InitialState(self)


class InitialState:
    """A freshly started message."""

    def __init__(self, encoder: Encoder) -> None:
        self.encoder = encoder

    def with_header(self) -> HeaderState:
        """Opens the standard header section."""
        self.encoder._buffer.extend(b'{"StandardHeader":{')
        return HeaderState(self.encoder)


class _SectionState:
    def __init__(self, encoder: Encoder) -> None:
        self._encoder = encoder
        self._empty = True

    def _add(self, field: object, value: object) -> None:
        name = _field_name(field)
        text = to_string(value)
        buffer = self._encoder._buffer
        if not self._empty:
            buffer.extend(b",")
        self._empty = False
        buffer.extend(json.dumps(name).encode("ascii"))
        buffer.extend(b":")
        buffer.extend(json.dumps(text).encode("ascii"))


class HeaderState(_SectionState):
    """The standard header section is open."""

    def set(self, field: object, value: object) -> HeaderState:
        """Adds ``field`` with ``value`` to the header."""
        self._add(field, value)
        return self

    def with_body(self) -> BodyState:
        """Closes the header and opens the body."""
        self._encoder._buffer.extend(b'},"Body":{')
        return BodyState(self._encoder)


class BodyState(_SectionState):
    """The body section is open."""

    def set(self, field: object, value: object) -> BodyState:
        """Adds ``field`` with ``value`` to the body."""
        self._add(field, value)
        return self

    def with_trailer(self) -> TrailerState:
        """Closes the body and opens the standard trailer."""
        self._encoder._buffer.extend(b'},"StandardTrailer":{')
        return TrailerState(self._encoder)


class TrailerState(_SectionState):
    """The standard trailer section is open."""

    def set(self, field: object, value: object) -> TrailerState:
        """Adds ``field`` with ``value`` to the trailer."""
        self._add(field, value)
        return self

    def done(self) -> str:
        """Closes the message and returns its JSON text."""
        self._encoder._buffer.extend(b"}}")
        return self._encoder._buffer.decode("utf-8")
"""Incremental decoding of SOFH-enclosed message streams."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from fixwire.sofh.errors import IncompleteError, SofhIOError
from fixwire.sofh.frame import Frame


class Decoder:
    """A buffering parser for SOFH-enclosed messages.

    SOFH (Simple Open Framing Header) is an encoding-agnostic framing
    mechanism for variable-length messages: each payload is preceded by a
    six-byte header with its total length and encoding type.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def needed(self) -> int:
        """Returns how many more bytes are needed to complete the current frame.

        Zero means a frame is ready. Raises
        :class:`~fixwire.sofh.errors.InvalidMessageLengthError` if the
        buffered header is invalid.
        """
        try:
            Frame.decode(self._buffer)
        except IncompleteError as err:
            return err.needed
        return 0

    def feed(self, data: bytes) -> None:
        """Appends ``data`` to the internal buffer."""
        self._buffer.extend(data)

    def attempt_decoding(self) -> None:
        """Raises a SOFH error unless a complete frame is buffered."""
        Frame.decode(self._buffer)

    def current_frame(self) -> Frame:
        """Returns the buffered frame, raising a SOFH error if it is not complete."""
        return Frame.decode(self._buffer)

    def clear(self) -> None:
        """Discards all buffered bytes."""
        self._buffer.clear()

    def read_frames(self, reader: BinaryIO) -> Iterator[Frame]:
        """Yields frames read from ``reader`` until it is exhausted.

        Raises :class:`~fixwire.sofh.errors.IncompleteError` if the stream
        ends in the middle of a frame and
        :class:`~fixwire.sofh.errors.SofhIOError` on read failures.
        """
        while True:
            needed = self.needed()
            if needed == 0:
                frame = self.current_frame()
                self.clear()
                yield frame
                continue
            try:
                chunk = reader.read(needed)
            except OSError as err:
                raise SofhIOError(err) from err
            if not chunk:
                if not self._buffer:
                    return
                self.attempt_decoding()
            self.feed(chunk)
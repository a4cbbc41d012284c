"""Sequence number tracking within a FIX session."""

from __future__ import annotations

from dataclasses import dataclass


class SeqNumberError(Exception):
    """An inbound sequence number does not match the expected one."""


class SeqNumberTooLowError(SeqNumberError):
    """The inbound sequence number is lower than expected."""


class SeqNumberRecoverError(SeqNumberError):
    """The inbound sequence number is higher than expected; messages were missed."""


class MissingSeqNumberError(SeqNumberError):
    """The message carries no sequence number."""


@dataclass
class SeqNumbers:
    """Expected sequence numbers of the next inbound and outbound messages."""

    next_inbound: int = 1
    next_outbound: int = 1

    def __post_init__(self) -> None:
        if self.next_inbound < 1 or self.next_outbound < 1:
            raise ValueError("FIX sequence numbers must be strictly positive")

    def incr_inbound(self) -> None:
        self.next_inbound += 1

    def incr_outbound(self) -> None:
        self.next_outbound += 1

    def validate_inbound(self, inbound: int) -> None:
        """Raises unless ``inbound`` is the expected inbound sequence number."""
        if inbound < self.next_inbound:
            raise SeqNumberTooLowError(
                f"sequence number {inbound} is lower than expected {self.next_inbound}"
            )
        if inbound > self.next_inbound:
            raise SeqNumberRecoverError(
                f"sequence number {inbound} is higher than expected {self.next_inbound}"
            )


@dataclass(frozen=True)
class ResendRequestRange:
    """The ``MsgSeqNum`` range of a ``ResendRequest``; no ``end`` means open-ended."""

    start: int
    end: int | None = None
"""Rules on the heartbeat interval agreed out of band."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta

from fixwire.session import errs

_ONE_SECOND = timedelta(seconds=1)


def _whole_seconds(value: timedelta) -> int:
    return value // _ONE_SECOND


class InvalidHeartbeatError(ValueError):
    """A proposed heartbeat interval violates the heartbeat rule."""


class HeartbeatRule(ABC):
    """A rule that initiator-proposed heartbeat intervals must satisfy."""

    @abstractmethod
    def validate(self, proposal: timedelta) -> None:
        """Raises :class:`InvalidHeartbeatError` if ``proposal`` is not allowed."""


@dataclass(frozen=True)
class ExactHeartbeat(HeartbeatRule):
    """The acceptor requires exactly ``expected``."""

    expected: timedelta

    def validate(self, proposal: timedelta) -> None:
        if proposal != self.expected:
            raise InvalidHeartbeatError(errs.heartbeat_exact(_whole_seconds(self.expected)))


@dataclass(frozen=True)
class RangeHeartbeat(HeartbeatRule):
    """The acceptor requires a value between ``start`` and ``end``, inclusive."""

    start: timedelta
    end: timedelta

    def validate(self, proposal: timedelta) -> None:
        if not self.start <= proposal <= self.end:
            raise InvalidHeartbeatError(
                errs.heartbeat_range(_whole_seconds(self.start), _whole_seconds(self.end))
            )


@dataclass(frozen=True)
class AnyHeartbeat(HeartbeatRule):
    """The acceptor allows any non-zero interval."""

    def validate(self, proposal: timedelta) -> None:
        if proposal == timedelta(0):
            raise InvalidHeartbeatError(errs.heartbeat_gt_0())
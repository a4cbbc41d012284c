"""Configuration options for FIX sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class Config:
    """Settings of a FIX session.

    ``verify_test_indicator`` asks for ``TestMessageIndicator <464>`` to be
    checked; ``max_allowed_latency`` bounds latency by sending time.
    """

    verify_test_indicator: bool = True
    max_allowed_latency: timedelta = field(default_factory=lambda: timedelta(seconds=3))


@dataclass(frozen=True)
class Environment:
    """The kind of environment a FIX connection runs in."""

    is_production: bool
    allow_test: bool = True

    def __post_init__(self) -> None:
        if not self.is_production and not self.allow_test:
            raise ValueError("a testing environment always allows test messages")

    @classmethod
    def production(cls, allow_test: bool) -> Environment:
        """A production environment, optionally accepting test messages."""
        return cls(is_production=True, allow_test=allow_test)

    @classmethod
    def testing(cls) -> Environment:
        """A testing environment."""
        return cls(is_production=False)

    def allows_testing(self) -> bool:
        """Whether test messages are accepted."""
        return self.allow_test
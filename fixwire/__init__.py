"""Building blocks for FIX protocol data: field values, SOFH framing, FIX JSON encoding, FIXS cipher suites and session rules."""

__version__ = "0.1.0"
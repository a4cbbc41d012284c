"""Configuration for the FIX JSON encoding."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Config:
    """Settings for FIX JSON encoding.

    ``pretty_print`` asks for indented, human-readable output when encoding;
    it is off by default and has no effect when decoding.
    """

    pretty_print: bool = False
"""Coin flips rendered as heads/tails or true/false."""

from __future__ import annotations

import json
import random
import sys
from typing import TextIO


def _label(result: bool, boolean: bool) -> str:
    if boolean:
        return "true" if result else "false"
    return "heads" if result else "tails"


def flip(count: int = 1, boolean: bool = False, rng: random.Random | None = None) -> list[str]:
    """Flip a fair coin ``count`` times and return the labelled results."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if rng is None:
        rng = random.Random()
    return [_label(rng.random() < 0.5, boolean) for _ in range(count)]


def run(
    count: int = 1,
    boolean: bool = False,
    as_json: bool = False,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> None:
    """Flip coins and print one result per line, or a pretty JSON array."""
    if out is None:
        out = sys.stdout
    flips = flip(count, boolean, rng)
    if as_json:
        print(json.dumps(flips, indent=2), file=out)
    else:
        for result in flips:
            print(result, file=out)
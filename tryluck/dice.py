"""Dice notation parsing and rolling."""

from __future__ import annotations

import json
import random
import re
import sys
from dataclasses import dataclass
from typing import TextIO

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, low: int, high: int) -> int | None:
    """Parse a decimal integer within ``low..=high``; ``None`` if it is not one."""
    if not _INTEGER.fullmatch(text) or (low >= 0 and text.startswith("-")):
        return None
    value = int(text)
    return value if low <= value <= high else None


def _u32(text: str) -> int | None:
    return _parse_int(text, 0, 2**32 - 1)


def _i32(text: str) -> int | None:
    return _parse_int(text, -(2**31), 2**31 - 1)


@dataclass(frozen=True)
class DiceSpec:
    """Components read from a spec; ``None`` where the spec gave none."""

    count: int | None = None
    sides: int | None = None
    modifier: int | None = None


@dataclass(frozen=True)
class DiceResult:
    """Rolled values plus the modifier; ``summed`` requests a total."""

    rolls: tuple[int, ...]
    modifier: int = 0
    summed: bool = False

    @property
    def total(self) -> int:
        return sum(self.rolls) + self.modifier

    @property
    def show_total(self) -> bool:
        return self.summed or self.modifier != 0

    def to_json_value(self) -> list[int] | dict[str, object]:
        """Plain list of rolls, or ``{"rolls", "total"}`` when a total is shown."""
        if self.show_total:
            return {"rolls": list(self.rolls), "total": self.total}
        return list(self.rolls)


def parse_spec(spec: str) -> DiceSpec:
    """Parse ``3d10``, ``d6``, ``3d10+2``, ``2d8-1`` or a plain count such as ``3``."""
    d_pos = spec.lower().find("d")
    if d_pos < 0:
        return DiceSpec(count=_u32(spec))

    count_str, rest = spec[:d_pos], spec[d_pos + 1 :]
    count = _u32(count_str) if count_str else None

    modifier: int | None = None
    sides_str = rest
    for sign, factor in (("+", 1), ("-", -1)):
        pos = rest.find(sign)
        if pos >= 0:
            parsed = _i32(rest[pos + 1 :])
            modifier = factor * parsed if parsed is not None else 0
            sides_str = rest[:pos]
            break

    return DiceSpec(count=count, sides=_u32(sides_str), modifier=modifier)


def roll(
    count: int = 1,
    sides: int = 6,
    modifier: int = 0,
    rng: random.Random | None = None,
) -> DiceResult:
    """Roll ``count`` dice with ``sides`` faces each."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count > 0 and sides < 1:
        raise ValueError(f"dice need at least one side, got {sides}")
    rng = rng or random.Random()
    return DiceResult(tuple(rng.randint(1, sides) for _ in range(count)), modifier)


def run(
    count: int = 1,
    sides: int = 6,
    modifier: int = 0,
    show_sum: bool = False,
    as_json: bool = False,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> None:
    """Roll dice and print the rolls, plus a total when summing or modified."""
    out = out or sys.stdout
    result = DiceResult(roll(count, sides, modifier, rng).rolls, modifier, show_sum)
    if as_json:
        print(json.dumps(result.to_json_value(), indent=2), file=out)
        return
    for value in result.rolls:
        print(value, file=out)
    if result.show_total:
        print(f"Total: {result.total}", file=out)
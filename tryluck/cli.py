"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from . import coin, dice, mcp_server, tarot

_VERSION = "0.2.0"
_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _bounded_int(low: int, high: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{value} is not in {low}..={high}")
        return value

    return convert


_u32 = _bounded_int(0, _U32_MAX)
_i32 = _bounded_int(_I32_MIN, _I32_MAX)


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with its coin, tarot, dice and mcp subcommands."""
    parser = argparse.ArgumentParser(
        prog="tryluck",
        description="Divination randomizer: tarot, dice, coins via CLI and MCP",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    coin_cmd = commands.add_parser("coin", help="Flip a coin and print heads or tails")
    coin_cmd.add_argument("--json", action="store_true", help="Output as JSON array")
    coin_cmd.add_argument("--boolean", action="store_true", help="Output true/false instead of heads/tails")
    coin_cmd.add_argument("count", nargs="?", type=_u32, default=1, help="Number of flips (default: 1)")

    tarot_cmd = commands.add_parser("tarot", help="Draw tarot cards from the Major Arcana")
    tarot_cmd.add_argument(
        "--json", action="store_true", help="Output as JSON array of {card, orientation} objects"
    )
    tarot_cmd.add_argument(
        "--case",
        choices=[c.value for c in tarot.Case],
        help="Card name case format (default: proper for plain text, snake for --json)",
    )
    tarot_cmd.add_argument("count", nargs="?", type=_u32, default=1, help="Number of cards to draw (default: 1)")

    dice_cmd = commands.add_parser("dice", help="Roll dice")
    dice_cmd.add_argument(
        "spec", nargs="?", help="Dice notation (e.g. 3d10, d6, 3d10+2, 2d8-1) or plain count (e.g. 3)"
    )
    dice_cmd.add_argument("-d", "--sides", type=_u32, help="Number of sides (default: 6, overrides notation)")
    dice_cmd.add_argument(
        "-m", "--modifier", type=_i32, help="Modifier added to total (default: 0, overrides notation)"
    )
    dice_cmd.add_argument("--sum", action="store_true", help="Output sum of all rolls")
    dice_cmd.add_argument("--json", action="store_true", help="Output as JSON")

    commands.add_parser("mcp", help="Start the MCP server (stdio transport)")
    return parser


def _run_dice(args: argparse.Namespace) -> None:
    count, sides, modifier = 1, 6, 0
    notation_used = False
    if args.spec is not None:
        notation_used = "d" in args.spec.lower()
        spec = dice.parse_spec(args.spec)
        count = spec.count if spec.count is not None else count
        sides = spec.sides if spec.sides is not None else sides
        modifier = spec.modifier if spec.modifier is not None else modifier
    dice.run(
        count,
        args.sides if args.sides is not None else sides,
        args.modifier if args.modifier is not None else modifier,
        args.sum or notation_used,
        args.json,
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the chosen command and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "coin":
            coin.run(args.count, args.boolean, args.json)
        elif args.command == "tarot":
            case = tarot.Case(args.case) if args.case is not None else None
            tarot.run(args.count, args.json, case)
        elif args.command == "dice":
            _run_dice(args)
        else:
            mcp_server.run()
    except ValueError as exc:
        print(f"tryluck: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
# tryluck

Random results for storytelling and tabletop role-playing games: coin flips, dice rolls and Major Arcana tarot draws. Use them from the command line, or run an MCP server over standard input and output so an AI assistant can call them as tools.

It has no dependencies beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
tryluck --version
tryluck --help
```

### Coins

```
tryluck coin              # heads or tails
tryluck coin 3            # three flips, one per line
tryluck coin --boolean    # true or false instead of heads or tails
tryluck coin 2 --json     # a JSON array such as ["heads", "tails"]
```

### Dice

```
tryluck dice              # one six-sided die
tryluck dice 3            # three six-sided dice
tryluck dice 3d10         # three ten-sided dice, then the total
tryluck dice d20+2        # one twenty-sided die, with 2 added to the total
tryluck dice 2d8-1 --json # {"rolls": [...], "total": N}
tryluck dice 4 -d 12 -m 3 # explicit sides and modifier override the notation
tryluck dice 3 --sum      # print the total as well
```

The spec is either dice notation (`NdS`, `dS`, `NdS+M`, `NdS-M`, with `d` or `D`) or a plain count. Parts that are missing or cannot be read fall back to one die, six sides and no modifier. `-d/--sides` and `-m/--modifier` take precedence over the notation.

The total is printed after the rolls (as `Total: N`, or as an object with `rolls` and `total` under `--json`) whenever `--sum` is given, the spec is dice notation (anything with a `d`), or the modifier is non-zero. Otherwise the rolls are printed one per line, or as a JSON array.

Asking for dice with zero sides prints an error to standard error and exits with status 1.

### Tarot

```
tryluck tarot                 # draw one card
tryluck tarot 3               # draw three different cards
tryluck tarot 3 --json        # [{"card": "the_fool", "orientation": "upright"}, ...]
tryluck tarot --case snake    # names such as the_high_priestess
tryluck tarot --json --case proper
```

Cards come from the 22 Major Arcana and are drawn without replacement. The count is clamped to between 1 and 22. Each card is upright or reversed with equal chance. In plain text output a reversed card's name is printed backwards. Plain text uses proper names ("The High Priestess") by default, and `--json` uses snake_case names ("the_high_priestess") by default.

## MCP server

```
tryluck mcp
```

This starts a Model Context Protocol server that reads one JSON-RPC 2.0 message per line from standard input and writes one reply per line to standard output; log messages go to standard error. It answers `initialize`, `ping`, `tools/list` and `tools/call`, ignores notifications, and stops at the end of input. It offers three tools, each returning its result as compact JSON text:

- `coin` — `count` (at least one flip is always made), `boolean`
- `dice` — `notation`, `count`, `sides`, `modifier`, `sum`; explicit values override the notation, and the result is `{"rolls": [...], "total": N}` when `sum` is true, the modifier is non-zero, or the notation contains a `d`
- `tarot` — `count`, `case` (`"proper"` for proper names; anything else gives snake_case)

Arguments of the wrong type or out of range are answered with a JSON-RPC "invalid params" error.

The server can also be driven from Python: `tryluck.mcp_server.TryluckServer` takes an optional `random.Random`, `handle(message)` answers one decoded message, and `serve(reader, writer)` runs the line loop over any text streams. `tryluck.mcp_server.run()` serves on standard input and output.

## Library use

The modules `tryluck.coin`, `tryluck.dice` and `tryluck.tarot` can be imported directly. Each function takes an optional `random.Random`, so you can seed it and get the same results every time:

```python
import random
from tryluck.coin import flip
from tryluck.dice import parse_spec, roll
from tryluck.tarot import Case, draw

rng = random.Random(42)

flips = flip(3, rng=rng)                 # e.g. ["heads", "tails", "heads"]

spec = parse_spec("3d10+2")              # DiceSpec(count=3, sides=10, modifier=2)
result = roll(3, 10, 2, rng)             # DiceResult
result.rolls, result.total               # the individual rolls and their sum plus 2
result.to_json_value()                   # {"rolls": [...], "total": N}

cards = draw(3, Case.PROPER, rng)        # list of TarotDraw(card, orientation)
[c.to_dict() for c in cards]
```

Each module also has a `run` function that prints its results the way the command line does, to `sys.stdout` or to a stream passed as `out`.
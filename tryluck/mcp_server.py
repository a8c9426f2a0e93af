"""Model Context Protocol server speaking newline-delimited JSON-RPC over stdio."""

from __future__ import annotations

import json
import logging
import random
import sys
from typing import Any, TextIO

from . import coin as coin_mod
from . import dice as dice_mod
from . import tarot as tarot_mod

log = logging.getLogger(__name__)

PROTOCOL_VERSION = "2025-06-18"
SERVER_NAME = "tryluck"
SERVER_VERSION = "0.2.0"
INSTRUCTIONS = (
    "Tryluck provides randomization tools for TRPG and games. "
    "Use coin to flip a coin. "
    "Use dice to roll dice (supports notation like 3d10+2). "
    "Use tarot to draw Major Arcana tarot cards."
)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

_U32 = (0, 2**32 - 1)
_I32 = (-(2**31), 2**31 - 1)


def _prop(kind: str, description: str, **extra: Any) -> dict[str, Any]:
    return {"type": [kind, "null"], "description": description, **extra}


def _u32_prop(description: str) -> dict[str, Any]:
    return _prop("integer", description, format="uint32", minimum=0)


_TOOL_SCHEMAS: dict[str, tuple[str, dict[str, Any]]] = {
    "dice": (
        "Roll dice one or more times. Returns a JSON array of roll results normally, "
        'or an object {"rolls": [...], "total": N} when sum=true or modifier is non-zero. '
        'Supports dice notation (e.g. "3d10", "d6+2") or explicit count/sides/modifier parameters.',
        {
            "notation": _prop(
                "string",
                'Dice notation (e.g. "3d10", "d6", "3d10+2"). '
                "Overridden by explicit count/sides/modifier.",
            ),
            "sides": _u32_prop("Number of sides (default: 6)"),
            "count": _u32_prop("Number of rolls (default: 1)"),
            "modifier": _prop("integer", "Modifier added to total (default: 0)", format="int32"),
            "sum": _prop(
                "boolean",
                "Return {rolls, total} instead of a plain array (implied when modifier is non-zero)",
            ),
        },
    ),
    "coin": (
        "Flip a coin one or more times. Returns a JSON array of heads/tails strings, "
        "or true/false strings when boolean=true.",
        {
            "count": _u32_prop("Number of flips (default: 1)"),
            "boolean": _prop("boolean", "Output true/false instead of heads/tails (default: false)"),
        },
    ),
    "tarot": (
        "Draw one or more Major Arcana tarot cards. Returns a JSON array of objects with "
        '`card` (card name) and `orientation` ("upright" or "reversed") fields. '
        'Card names use snake_case by default (e.g. "the_fool"), or proper case when case="proper".',
        {
            "count": _u32_prop("Number of cards to draw (default: 1, max: 22)"),
            "case": _prop(
                "string",
                'Card name case: "snake" (default, e.g. "the_fool") or "proper" (e.g. "The Fool")',
            ),
        },
    ),
}


class InvalidParams(ValueError):
    """Raised when tool arguments do not match the tool's parameters."""


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"))


def _param(params: dict[str, Any], name: str, kind: type, bounds: tuple[int, int] | None = None) -> Any:
    """Fetch an optional typed argument, checking integer bounds when given."""
    value = params.get(name)
    if value is None:
        return None
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise InvalidParams(f"{name}: expected {kind.__name__}, got {value!r}")
    if bounds is not None and not bounds[0] <= value <= bounds[1]:
        raise InvalidParams(f"{name}: {value} is out of range {bounds[0]}..={bounds[1]}")
    return value


def _reply(request_id: Any, key: str, value: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": request_id, key: value}


def _error(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return _reply(request_id, "error", {"code": code, "message": message})


class TryluckServer:
    """Serves the coin, dice and tarot tools."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def dice(self, params: dict[str, Any]) -> str:
        """Roll dice; a notation containing 'd' always reports a total."""
        notation = _param(params, "notation", str)
        explicit = (
            _param(params, "count", int, _U32),
            _param(params, "sides", int, _U32),
            _param(params, "modifier", int, _I32),
        )
        want_sum = _param(params, "sum", bool) or False

        parsed = dice_mod.parse_spec(notation) if notation is not None else dice_mod.DiceSpec()
        count, sides, modifier = (
            next(v for v in candidates if v is not None)
            for candidates in zip(explicit, (parsed.count, parsed.sides, parsed.modifier), (1, 6, 0))
        )
        notation_used = notation is not None and "d" in notation.lower()

        rolled = dice_mod.roll(count, sides, modifier, self.rng)
        result = dice_mod.DiceResult(rolled.rolls, modifier, want_sum or notation_used)
        return _compact(result.to_json_value())

    def coin(self, params: dict[str, Any]) -> str:
        """Flip at least one coin."""
        count = _param(params, "count", int, _U32)
        boolean = _param(params, "boolean", bool) or False
        return _compact(coin_mod.flip(max(count or 1, 1), boolean, self.rng))

    def tarot(self, params: dict[str, Any]) -> str:
        """Draw Major Arcana cards; any case other than 'proper' means snake case."""
        count = _param(params, "count", int, _U32)
        case_name = _param(params, "case", str)
        case = tarot_mod.Case.PROPER if case_name == "proper" else tarot_mod.Case.SNAKE
        draws = tarot_mod.draw(count if count is not None else 1, case, self.rng)
        return _compact([d.to_dict() for d in draws])

    def info(self) -> dict[str, Any]:
        """The result of the initialize handshake."""
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            "instructions": INSTRUCTIONS,
        }

    def list_tools(self) -> list[dict[str, Any]]:
        """Tool descriptors with their input schemas."""
        return [
            {"name": name, "description": description, "inputSchema": {"type": "object", "properties": props}}
            for name, (description, props) in _TOOL_SCHEMAS.items()
        ]

    def _call_tool(self, params: Any) -> dict[str, Any]:
        if not isinstance(params, dict):
            raise InvalidParams("tools/call needs an object of params")
        name = params.get("name")
        arguments = params.get("arguments") or {}
        if not isinstance(arguments, dict):
            raise InvalidParams("arguments must be an object")
        if name not in _TOOL_SCHEMAS:
            raise InvalidParams(f"unknown tool: {name!r}")
        try:
            text, is_error = getattr(self, name)(arguments), False
        except InvalidParams:
            raise
        except ValueError as exc:
            text, is_error = str(exc), True
        return {"content": [{"type": "text", "text": text}], "isError": is_error}

    def handle(self, message: Any) -> dict[str, Any] | None:
        """Answer one JSON-RPC message; notifications and responses get ``None``."""
        if not isinstance(message, dict):
            return _error(None, INVALID_REQUEST, "invalid request")
        request_id = message.get("id")
        method = message.get("method")
        if message.get("jsonrpc") == "2.0" and method is None and ("result" in message or "error" in message):
            return None
        if message.get("jsonrpc") != "2.0" or not isinstance(method, str):
            return _error(request_id, INVALID_REQUEST, "invalid request")
        if "id" not in message:
            return None

        handlers = {
            "initialize": self.info,
            "ping": dict,
            "tools/list": lambda: {"tools": self.list_tools()},
            "tools/call": lambda: self._call_tool(message.get("params")),
        }
        handler = handlers.get(method)
        if handler is None:
            return _error(request_id, METHOD_NOT_FOUND, f"method not found: {method}")
        try:
            return _reply(request_id, "result", handler())
        except InvalidParams as exc:
            return _error(request_id, INVALID_PARAMS, str(exc))

    def serve(self, reader: TextIO, writer: TextIO) -> None:
        """Read one JSON message per line until end of input, writing replies."""
        for line in reader:
            if not line.strip():
                continue
            try:
                response = self.handle(json.loads(line))
            except json.JSONDecodeError as exc:
                log.warning("unparseable message: %s", exc)
                response = _error(None, PARSE_ERROR, "parse error")
            if response is not None:
                writer.write(_compact(response) + "\n")
                writer.flush()


def run(reader: TextIO | None = None, writer: TextIO | None = None) -> None:
    """Serve on the given streams, standard input and output by default."""
    logging.basicConfig(stream=sys.stderr, level=logging.INFO)
    TryluckServer().serve(reader or sys.stdin, writer or sys.stdout)
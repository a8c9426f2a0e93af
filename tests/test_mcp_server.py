import io
import json
import random

import pytest

from tryluck import mcp_server
from tryluck.mcp_server import InvalidParams, TryluckServer
from tryluck.tarot import CARDS


@pytest.fixture
def server():
    return TryluckServer(random.Random(1234))


def _request(method, params=None, request_id=1):
    message = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        message["params"] = params
    return message


def test_dice_defaults_to_single_d6_array(server):
    rolls = json.loads(server.dice({}))
    assert isinstance(rolls, list)
    assert len(rolls) == 1
    assert 1 <= rolls[0] <= 6


def test_dice_notation_reports_total(server):
    value = json.loads(server.dice({"notation": "3d10+2"}))
    assert len(value["rolls"]) == 3
    assert all(1 <= r <= 10 for r in value["rolls"])
    assert value["total"] == sum(value["rolls"]) + 2


def test_dice_explicit_params_override_notation(server):
    value = json.loads(server.dice({"notation": "2d6", "count": 4, "sides": 3}))
    assert len(value["rolls"]) == 4
    assert all(1 <= r <= 3 for r in value["rolls"])
    assert value["total"] == sum(value["rolls"])


def test_dice_plain_count_notation_stays_array(server):
    rolls = json.loads(server.dice({"notation": "5"}))
    assert isinstance(rolls, list)
    assert len(rolls) == 5


def test_dice_sum_flag_gives_object(server):
    value = json.loads(server.dice({"count": 2, "sum": True}))
    assert value["total"] == sum(value["rolls"])


def test_dice_output_is_compact(server):
    text = server.dice({"notation": "4d6"})
    assert " " not in text


@pytest.mark.parametrize("params", [{"count": -1}, {"sides": "six"}, {"sum": 1}, {"modifier": 2**31}])
def test_dice_rejects_bad_params(server, params):
    with pytest.raises(InvalidParams):
        server.dice(params)


def test_coin_zero_count_flips_once(server):
    assert len(json.loads(server.coin({"count": 0}))) == 1


def test_coin_boolean_labels(server):
    flips = json.loads(server.coin({"count": 20, "boolean": True}))
    assert len(flips) == 20
    assert set(flips) <= {"true", "false"}


def test_tarot_caps_at_deck_size(server):
    draws = json.loads(server.tarot({"count": 30}))
    assert len(draws) == len(CARDS)
    assert {d["card"] for d in draws} == {c.snake for c in CARDS}
    assert {d["orientation"] for d in draws} <= {"upright", "reversed"}


def test_tarot_proper_case(server):
    draws = json.loads(server.tarot({"count": 3, "case": "proper"}))
    assert all(d["card"] in {c.proper for c in CARDS} for d in draws)


def test_tarot_unknown_case_falls_back_to_snake(server):
    draws = json.loads(server.tarot({"case": "shouting"}))
    assert draws[0]["card"] in {c.snake for c in CARDS}


def test_initialize(server):
    response = server.handle(_request("initialize", {"protocolVersion": mcp_server.PROTOCOL_VERSION}))
    assert response["id"] == 1
    assert response["result"]["serverInfo"]["name"] == "tryluck"
    assert "tools" in response["result"]["capabilities"]
    assert response["result"]["instructions"] == mcp_server.INSTRUCTIONS


def test_list_tools(server):
    response = server.handle(_request("tools/list"))
    tools = response["result"]["tools"]
    assert {t["name"] for t in tools} == {"coin", "dice", "tarot"}
    assert all(t["inputSchema"]["type"] == "object" for t in tools)


def test_call_tool_returns_text_content(server):
    response = server.handle(_request("tools/call", {"name": "coin", "arguments": {"count": 3}}))
    result = response["result"]
    assert result["isError"] is False
    assert len(json.loads(result["content"][0]["text"])) == 3


def test_call_tool_failure_is_tool_error(server):
    response = server.handle(_request("tools/call", {"name": "dice", "arguments": {"sides": 0}}))
    assert response["result"]["isError"] is True


def test_call_unknown_tool(server):
    response = server.handle(_request("tools/call", {"name": "runes"}))
    assert response["error"]["code"] == mcp_server.INVALID_PARAMS


def test_call_with_bad_arguments(server):
    response = server.handle(_request("tools/call", {"name": "coin", "arguments": {"count": "many"}}))
    assert response["error"]["code"] == mcp_server.INVALID_PARAMS


def test_unknown_method(server):
    response = server.handle(_request("resources/list"))
    assert response["error"]["code"] == mcp_server.METHOD_NOT_FOUND


def test_notification_gets_no_reply(server):
    assert server.handle({"jsonrpc": "2.0", "method": "notifications/initialized"}) is None


def test_invalid_request(server):
    response = server.handle({"id": 7, "method": "ping"})
    assert response["error"]["code"] == mcp_server.INVALID_REQUEST
    assert response["id"] == 7


def test_serve_answers_each_request(server):
    lines = [
        json.dumps(_request("initialize", request_id=1)),
        json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
        "",
        "{not json",
        json.dumps(_request("ping", request_id=2)),
    ]
    reader = io.StringIO("\n".join(lines) + "\n")
    writer = io.StringIO()
    server.serve(reader, writer)
    replies = [json.loads(line) for line in writer.getvalue().splitlines()]
    assert len(replies) == 3
    assert replies[0]["id"] == 1
    assert replies[1]["error"]["code"] == mcp_server.PARSE_ERROR
    assert replies[2] == {"jsonrpc": "2.0", "id": 2, "result": {}}


def test_run_uses_given_streams():
    reader = io.StringIO(json.dumps(_request("tools/list", request_id=5)) + "\n")
    writer = io.StringIO()
    mcp_server.run(reader, writer)
    reply = json.loads(writer.getvalue())
    assert reply["id"] == 5
    assert len(reply["result"]["tools"]) == 3
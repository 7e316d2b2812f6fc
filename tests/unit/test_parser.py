# tests/unit/test_parser.py
"""
Unit tests for decoding JSON-RPC responses.
"""
import json
from typing import Any, Dict, List

import pytest

from factom_rpc.errors import MalformedResponseError, ParseError, SchemaMismatchError
from factom_rpc.models import Balance, MultipleBalances
from factom_rpc.rpc_library.core import ApiError, ApiResponse
from factom_rpc.rpc_library.parser import json_shape, parse


def body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


class TestSuccessBranch:

    def test_balance(self):
        response = parse(body({"id": 1, "result": {"balance": 42}}), Balance)
        assert response.success()
        assert response.id == 1
        assert response.error is None
        assert isinstance(response.result, Balance)
        assert response.result.balance == 42

    def test_nested_schema(self):
        payload = {
            "jsonrpc": "2.0",
            "id": 0,
            "result": {
                "currentheight": 192663,
                "lastsavedheight": 192662,
                "balances": [{"ack": 4008, "saved": 4008, "err": ""}],
            },
        }
        response = parse(body(payload), MultipleBalances)
        assert response.result.balances[0].ack == 4008

    def test_untyped_result(self):
        response = parse(body({"id": 3, "result": [1, 2, 3]}))
        assert response.result == [1, 2, 3]

    def test_null_result_is_success(self):
        response = parse(body({"id": 3, "result": None}))
        assert response.success()
        assert response.result is None

    def test_null_error_alongside_result(self):
        response = parse(body({"id": 3, "result": {"balance": 1}, "error": None}), Balance)
        assert response.success()


class TestErrorBranch:

    def test_invalid_request(self):
        response = parse(body({"id": 1, "error": {"code": -32600, "message": "Invalid Request"}}), Balance)
        assert not response.success()
        assert response.is_error()
        assert response.error.code == -32600
        assert response.error.message == "Invalid Request"
        assert response.result is None

    def test_error_with_data_and_null_id(self):
        payload = {
            "jsonrpc": "2.0",
            "id": None,
            "error": {"code": -32602, "message": "Invalid params", "data": "ERROR! Invalid params passed in, expected addresses"},
        }
        response = parse(body(payload), MultipleBalances)
        assert response.id is None
        assert response.error.data.startswith("ERROR!")
        assert "-32602" in str(response.error)

    def test_error_wins_over_result(self):
        payload = {"id": 2, "result": "not-a-balance", "error": {"code": -32603, "message": "Internal error"}}
        response = parse(body(payload), Balance)
        assert response.error.code == -32603
        assert response.result is None

    def test_error_member_must_be_an_error_object(self):
        with pytest.raises(MalformedResponseError):
            parse(body({"id": 1, "error": "boom"}))

    def test_error_code_must_be_integer(self):
        with pytest.raises(MalformedResponseError):
            parse(body({"id": 1, "error": {"code": "x", "message": "boom"}}))


class TestMalformed:

    @pytest.mark.parametrize("raw", [b"", b"not json", b"{\"id\": 1,", b"\xff\xfe"])
    def test_not_json(self, raw):
        with pytest.raises(MalformedResponseError):
            parse(raw)

    @pytest.mark.parametrize("payload", [[1, 2], "text", 5, None])
    def test_not_an_object(self, payload):
        with pytest.raises(MalformedResponseError):
            parse(body(payload))

    def test_neither_result_nor_error(self):
        with pytest.raises(MalformedResponseError):
            parse(body({"jsonrpc": "2.0", "id": 1}))

    def test_string_id(self):
        with pytest.raises(MalformedResponseError):
            parse(body({"id": "abc", "result": 1}))

    def test_malformed_is_parse_error(self):
        with pytest.raises(ParseError):
            parse(b"<html>502 Bad Gateway</html>")


class TestSchemaMismatch:

    def test_scalar_instead_of_object(self):
        with pytest.raises(SchemaMismatchError) as exc_info:
            parse(body({"id": 1, "result": 42}), Balance, method="factoid-balance")
        error = exc_info.value
        assert error.method == "factoid-balance"
        assert error.expected == "Balance"
        assert error.actual == "number"
        assert "factoid-balance" in str(error)

    def test_reports_field_path(self):
        payload = {
            "id": 1,
            "result": {
                "currentheight": 1,
                "lastsavedheight": 1,
                "balances": [{"ack": 1, "saved": 1, "err": ""}, {"ack": "lots", "saved": 1, "err": ""}],
            },
        }
        with pytest.raises(SchemaMismatchError) as exc_info:
            parse(body(payload), MultipleBalances, method="multiple-fct-balances")
        assert exc_info.value.path == ("balances", 1, "ack")
        assert exc_info.value.actual == "string"
        assert "balances.1.ack" in str(exc_info.value)

    def test_generic_container(self):
        with pytest.raises(SchemaMismatchError):
            parse(body({"id": 1, "result": {"a": 1}}), List[int])

    def test_missing_field(self):
        with pytest.raises(SchemaMismatchError) as exc_info:
            parse(body({"id": 1, "result": {}}), Balance)
        assert exc_info.value.path == ("balance",)
        assert exc_info.value.actual == "missing"
        assert "got missing at balance" in str(exc_info.value)

    def test_dict_type(self):
        response = parse(body({"id": 1, "result": {"a": 1}}), Dict[str, Any])
        assert response.result == {"a": 1}


class TestApiResponse:

    def test_cannot_hold_both_branches(self):
        with pytest.raises(ValueError):
            ApiResponse(id=1, result={"balance": 1}, error=ApiError(code=-1, message="x"))

    def test_json_shape_names(self):
        assert json_shape(None) == "null"
        assert json_shape(True) == "boolean"
        assert json_shape(1.5) == "number"
        assert json_shape({}) == "object"
        assert json_shape([]) == "array"

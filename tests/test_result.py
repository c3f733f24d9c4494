# tests/test_result.py
import pytest
from pydantic import ValidationError

from ticketdesk.core.result import DEFAULT_OK_MESSAGE, OperationResult


def test_ok_carries_data_and_default_message():
    r = OperationResult[list[int]].ok([1, 2])
    assert r.success is True
    assert r.message == DEFAULT_OK_MESSAGE
    assert r.data == [1, 2]


def test_fail_has_no_data():
    r = OperationResult[list[int]].fail("nope")
    assert r.success is False
    assert r.message == "nope"
    assert r.data is None


def test_failed_result_with_data_is_rejected():
    with pytest.raises(ValidationError):
        OperationResult[list[int]](success=False, message="x", data=[1])


def test_result_is_immutable():
    r = OperationResult[int].ok(1, "fine")
    with pytest.raises(ValidationError):
        r.success = False

import pytest

from wsclient.errors import (
    CloseCode,
    WSError,
    WSErrorCode,
    close_code_name,
    is_valid_close_code,
)


@pytest.mark.parametrize(
    "code",
    [
        CloseCode.NORMAL_CLOSURE,
        CloseCode.GOING_AWAY,
        CloseCode.PROTOCOL_ERROR,
        CloseCode.UNACCEPTABLE_DATA_TYPE,
        CloseCode.INVALID_FRAME_PAYLOAD_DATA,
        CloseCode.POLICY_VIOLATION,
        CloseCode.MESSAGE_TOO_BIG,
        CloseCode.MISSING_EXTENSION,
        CloseCode.UNEXPECTED_CONDITION,
        3000,
        3999,
        4000,
        4999,
    ],
)
def test_valid_close_codes(code):
    assert is_valid_close_code(code) is True


@pytest.mark.parametrize("code", [CloseCode.NOT_SET, 0, 999, 1004, 1005, 1006, 1012, 2999, 5000])
def test_invalid_close_codes(code):
    assert is_valid_close_code(code) is False


@pytest.mark.parametrize(
    "value, name",
    [
        (1000, "normal_closure"),
        (1007, "invalid_frame_payload_data"),
        (1011, "unexpected_condition"),
    ],
)
def test_close_code_values_match_rfc(value, name):
    assert close_code_name(value) == name
    assert is_valid_close_code(value) is True


@pytest.mark.parametrize(
    "code, name",
    [
        (CloseCode.NOT_SET, "not_set"),
        (CloseCode.NORMAL_CLOSURE, "normal_closure"),
        (CloseCode.GOING_AWAY, "going_away"),
        (CloseCode.PROTOCOL_ERROR, "protocol_error"),
        (CloseCode.MESSAGE_TOO_BIG, "message_too_big"),
        (1011, "unexpected_condition"),
    ],
)
def test_close_code_name(code, name):
    assert close_code_name(code) == name


@pytest.mark.parametrize("code", [3000, 4500, 1004, 65535])
def test_close_code_name_unknown(code):
    assert close_code_name(code) == "unknown"


@pytest.mark.parametrize(
    "code, name",
    [
        (WSErrorCode.SUCCESS, "success"),
        (WSErrorCode.CONNECTION_CLOSED, "connection_closed"),
        (WSErrorCode.TRANSPORT_ERROR, "transport_error"),
        (WSErrorCode.TIMEOUT_ERROR, "timeout_error"),
        (WSErrorCode.LOGIC_ERROR, "logic_error"),
    ],
)
def test_error_code_str(code, name):
    assert str(code) == name


def test_ws_error_attributes_and_raise():
    err = WSError(WSErrorCode.PROTOCOL_ERROR, "bad frame", CloseCode.PROTOCOL_ERROR)
    assert err.code is WSErrorCode.PROTOCOL_ERROR
    assert err.message == "bad frame"
    assert err.close_with_code == CloseCode.PROTOCOL_ERROR
    assert err.error_code_message() == "protocol_error"
    with pytest.raises(WSError) as info:
        raise err
    assert info.value.error_code_message() == "protocol_error"


def test_ws_error_default_close_code():
    err = WSError(WSErrorCode.URL_ERROR, "no scheme")
    assert err.close_with_code == CloseCode.NOT_SET
    assert "(close code not_set)" in str(err)


def test_ws_error_str_contains_parts():
    err = WSError(WSErrorCode.BUFFER_ERROR, "too large", CloseCode.MESSAGE_TOO_BIG)
    text = str(err)
    assert text.startswith("WSClientError buffer_error: too large")
    assert "message_too_big" in text


def test_ws_error_accepts_int_code():
    err = WSError(8, "inflate failed")
    assert err.code is WSErrorCode.COMPRESSION_ERROR
    assert err.error_code_message() == "compression_error"


def test_ws_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        WSError(2, "missing category")
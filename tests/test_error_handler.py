import pytest

from src.error_handler import ErrorHandler
from src.integrations.contracts.errors import (
    AuthRequiredError,
    BodyDecodeError,
    DecodeError,
    MissingParameterError,
    PreferenceValidationError,
    ProviderError,
    TransportError,
)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ProviderError("bad gateway", 502), 502),
        (ProviderError("not found", 404), 404),
        (MissingParameterError("client id is required"), 400),
        (PreferenceValidationError(["items: min=1 failed"]), 400),
        (BodyDecodeError("Invalid JSON"), 422),
        (AuthRequiredError(), 401),
        (DecodeError("bad body"), 500),
        (TransportError("timeout"), 500),
        (RuntimeError("boom"), 500),
        (KeyError("access_token"), 500),
    ],
)
def test_status_code_for(exc, expected):
    assert ErrorHandler().status_code_for(exc) == expected


def test_handle_exception_prefixes_message():
    eh = ErrorHandler()
    out = eh.handle_exception(ProviderError('{"error": "internal server error"}', 503), "couldn't create checkout")
    assert out.status_code == 503
    assert out.body == b'couldn\'t create checkout: {"error": "internal server error"}'
    assert out.media_type == "text/plain"


def test_handle_exception_without_prefix_uses_message_verbatim():
    out = ErrorHandler().handle_exception(AuthRequiredError())
    assert out.status_code == 401
    assert out.body == b"access token is required"


def test_handle_exception_logs_unexpected_errors(caplog):
    out = ErrorHandler().handle_exception(Exception("boom"), "couldn't get access token")
    assert out.status_code == 500
    assert out.body == b"couldn't get access token: boom"
    assert "Unhandled exception" in caplog.text

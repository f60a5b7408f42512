"""
Tests for translation error classification.
"""

import httpx
import openai
import pytest

from lingualink.translation.errors import (
    TranslationError,
    classify_error,
    create_translation_error,
    is_retryable,
)
from lingualink.translation.models import ERROR_MESSAGES, TranslationErrorCode

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def status_error(cls, status_code: int):
    response = httpx.Response(status_code, request=REQUEST)
    return cls(f"HTTP {status_code}", response=response, body=None)


class TestTranslationErrorCode:
    """Tests for TranslationErrorCode enum."""

    def test_codes_are_string_values(self):
        assert TranslationErrorCode.MISSING_API_KEY.value == "MISSING_API_KEY"
        assert TranslationErrorCode.RATE_LIMITED.value == "RATE_LIMITED"

    def test_every_code_has_a_distinct_message(self):
        messages = [code.default_message for code in TranslationErrorCode]

        assert set(ERROR_MESSAGES) == set(TranslationErrorCode)
        assert len(set(messages)) == len(messages)

    def test_configuration_errors(self):
        assert TranslationErrorCode.MISSING_API_KEY.is_configuration_error
        assert TranslationErrorCode.INVALID_API_KEY.is_configuration_error
        assert not TranslationErrorCode.TIMEOUT.is_configuration_error


class TestClassifyError:
    """Tests for classify_error function."""

    def test_openai_timeout(self):
        assert classify_error(openai.APITimeoutError(request=REQUEST)) == TranslationErrorCode.TIMEOUT

    def test_openai_connection_error(self):
        error = openai.APIConnectionError(request=REQUEST)

        assert classify_error(error) == TranslationErrorCode.NETWORK_ERROR

    def test_openai_authentication_error(self):
        error = status_error(openai.AuthenticationError, 401)

        assert classify_error(error) == TranslationErrorCode.AUTHENTICATION_FAILED

    def test_openai_rate_limit_error(self):
        error = status_error(openai.RateLimitError, 429)

        assert classify_error(error) == TranslationErrorCode.RATE_LIMITED

    def test_openai_server_error(self):
        error = status_error(openai.InternalServerError, 503)

        assert classify_error(error) == TranslationErrorCode.SERVICE_UNAVAILABLE

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (401, TranslationErrorCode.AUTHENTICATION_FAILED),
            (429, TranslationErrorCode.RATE_LIMITED),
            (408, TranslationErrorCode.TIMEOUT),
            (502, TranslationErrorCode.SERVICE_UNAVAILABLE),
            (400, TranslationErrorCode.TRANSLATION_FAILED),
        ],
    )
    def test_generic_status_error(self, status_code, expected):
        error = status_error(openai.APIStatusError, status_code)

        assert classify_error(error) == expected

    def test_builtin_timeout(self):
        assert classify_error(TimeoutError("timed out")) == TranslationErrorCode.TIMEOUT

    def test_builtin_connection_error(self):
        error = ConnectionError("refused")

        assert classify_error(error) == TranslationErrorCode.NETWORK_ERROR

    def test_unknown_exception(self):
        error = RuntimeError("boom")

        assert classify_error(error) == TranslationErrorCode.TRANSLATION_FAILED

    def test_translation_error_keeps_code(self):
        error = TranslationError(TranslationErrorCode.EMPTY_RESPONSE)

        assert classify_error(error) == TranslationErrorCode.EMPTY_RESPONSE


class TestIsRetryable:
    """No error is retried automatically."""

    @pytest.mark.parametrize("code", list(TranslationErrorCode))
    def test_never_retryable(self, code):
        assert is_retryable(code) is False


class TestCreateTranslationError:
    """Tests for create_translation_error."""

    def test_uses_default_message(self):
        error = create_translation_error(status_error(openai.RateLimitError, 429))

        assert error.code == TranslationErrorCode.RATE_LIMITED
        assert error.message == ERROR_MESSAGES[TranslationErrorCode.RATE_LIMITED]
        assert error.details == {"exception_type": "RateLimitError"}
        assert error.retryable is False

    def test_passes_translation_error_through(self):
        original = TranslationError(TranslationErrorCode.MISSING_API_KEY)

        assert create_translation_error(original) is original

    def test_to_dict(self):
        error = TranslationError(TranslationErrorCode.MISSING_API_KEY)

        assert error.to_dict() == {
            "error": ERROR_MESSAGES[TranslationErrorCode.MISSING_API_KEY],
            "code": "MISSING_API_KEY",
        }

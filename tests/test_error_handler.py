import logging

from chat_translate.core.error_handler import ErrorCategory, ErrorHandler
from chat_translate.web.exceptions import (
    InvalidResponseError, ProviderResponseError, RequestSetupError, TransportError,
    UnknownProviderError
)


def test_categorize_errors():
    handler = ErrorHandler({})

    assert handler.handle_exception(
        ProviderResponseError('Google', 500, 'boom'), 'Google', 'translate'
    ).category == ErrorCategory.PROVIDER_ERROR
    assert handler.handle_exception(
        TransportError('Google', 'POST', 'https://example.com'), 'Google', 'translate'
    ).category == ErrorCategory.TRANSPORT_ERROR
    assert handler.handle_exception(
        RequestSetupError(), 'Google', 'translate'
    ).category == ErrorCategory.SETUP_ERROR
    assert handler.handle_exception(
        InvalidResponseError('Google', 'missing data'), 'Google', 'translate'
    ).category == ErrorCategory.INVALID_RESPONSE
    assert handler.handle_exception(
        UnknownProviderError('provider', 'Bing'), 'Bing', 'translate'
    ).category == ErrorCategory.NOT_DISPATCHED


def test_unexpected_exception_is_setup_error(caplog):
    caplog.set_level(logging.INFO)

    error = ErrorHandler({}).handle_exception(TypeError('bad payload'), 'DeepL', 'translate')

    assert error.category == ErrorCategory.SETUP_ERROR
    assert error.message_en == 'bad payload'
    assert 'Error bad payload' in [r.getMessage() for r in caplog.records]


def test_unauthorized_suggests_checking_key():
    error = ErrorHandler({}).handle_exception(
        ProviderResponseError('DeepL', 403, 'Forbidden'), 'DeepL', 'translate'
    )

    assert error.http_status == 403
    assert 'API key' in error.suggestions_en[0]
    assert 'API 密钥' in error.suggestions_zh[0]


def test_transport_suggestion_mentions_proxy():
    handler = ErrorHandler({'network': {'proxy_server': 'http://127.0.0.1:7890'}})

    error = handler.handle_exception(TransportError('Google', 'POST', 'https://example.com'), 'Google', 'detect')

    assert 'http://127.0.0.1:7890' in error.suggestions_en[0]


def test_to_dict():
    error = ErrorHandler({}).handle_exception(
        ProviderResponseError('LibreTranslate', 400, '{"error": "bad"}'), 'LibreTranslate', 'detect'
    )

    data = error.to_dict()

    assert data['category'] == 'provider_error'
    assert data['provider'] == 'LibreTranslate'
    assert data['action'] == 'detect'
    assert data['http_status'] == 400
    assert data['message']['en'] == 'LibreTranslate: Provider responded with status 400'
    assert set(data['suggestions']) == {'zh', 'en'}

import logging

from chat_translate.core.models import Action, Provider, ResultStatus, TranslationRequest
from chat_translate.translators import (
    DeepLTranslator, GoogleTranslator, LibreTranslator, TranslatorManager, TRANSLATORS
)


def test_lookup_table_covers_every_provider():
    assert set(TRANSLATORS) == set(Provider)
    assert TRANSLATORS[Provider.GOOGLE] is GoogleTranslator
    assert TRANSLATORS[Provider.DEEPL] is DeepLTranslator
    assert TRANSLATORS[Provider.LIBRETRANSLATE] is LibreTranslator


def test_translators_are_reused():
    manager = TranslatorManager({})

    assert manager.get_translator(Provider.DEEPL) is manager.get_translator(Provider.DEEPL)


async def test_google_translate_end_to_end(fake_provider, config):
    fake_provider.respond('/language/translate/v2', {'data': {'translations': [{'translatedText': 'Hello'}]}})

    result = await TranslatorManager(config).run({
        'provider': 'Google', 'action': 'translate', 'text': 'Hallo', 'target': 'en',
        'api_key': 'K', 'sendAs': 'streamer',
    })

    assert result == {
        'success': True,
        'effects': [{'chatter': 'streamer', 'type': 'firebot:chat', 'message': 'Hello'}],
    }


async def test_deepl_detect_end_to_end(fake_provider, config):
    result = await TranslatorManager(config).run({
        'provider': 'DeepL', 'action': 'detect', 'text': 'Hallo', 'api_key': 'K',
    })

    assert result['effects'][0]['message'] == 'Detecting a language by itself is not supported by the DeepL API'
    assert fake_provider.requests == []


async def test_unknown_provider_sends_fallback_without_request(fake_provider, config, caplog):
    caplog.set_level(logging.INFO)

    result = await TranslatorManager(config).run({
        'provider': 'Bing', 'action': 'translate', 'text': 'Hallo', 'api_key': 'K', 'sendAs': 'bot',
    })

    assert result['success'] is True
    assert result['effects'][0]['message'] == 'Invalid translation provider or action!'
    assert fake_provider.requests == []
    assert any("'Bing'" in r.getMessage() for r in caplog.records if r.levelno == logging.WARNING)


async def test_translate_parameters_reports_not_dispatched(fake_provider, config):
    result = await TranslatorManager(config).translate_parameters({'provider': 'Google', 'action': 'transliterate'})

    assert result.status == ResultStatus.NOT_DISPATCHED
    assert result.error.to_dict()['category'] == 'not_dispatched'
    assert fake_provider.requests == []


async def test_provider_failure_still_succeeds_for_host(fake_provider, config):
    fake_provider.respond('/v2/translate', {'message': 'Wrong endpoint'}, status=403)

    result = await TranslatorManager(config).run({
        'provider': 'DeepL', 'action': 'translate', 'text': 'Hallo', 'target': 'EN', 'api_key': 'K',
    })

    assert result['success'] is True
    assert result['effects'][0]['message'] == 'Invalid translation provider or action!'


async def test_missing_parameters_use_defaults(fake_provider, config):
    fake_provider.respond('/v2/translate', {'translations': [{'text': 'Hello'}]})

    result = await TranslatorManager(config).run({'text': 'Hallo', 'api_key': 'K'})

    assert result['effects'][0] == {'chatter': 'bot', 'type': 'firebot:chat', 'message': 'Hello'}
    assert fake_provider.requests[0]['json'] == {'text': ['Hallo'], 'target_lang': 'en'}


async def test_invalid_send_as_falls_back_to_bot(fake_provider, config):
    result = await TranslatorManager(config).run({
        'provider': 'DeepL', 'action': 'detect', 'sendAs': 'moderator',
    })

    assert result['effects'][0]['chatter'] == 'bot'


async def test_translate_request(fake_provider, config):
    fake_provider.respond('/detect', [{'confidence': 99.0, 'language': 'es'}])

    result = await TranslatorManager(config).translate(
        TranslationRequest(Provider.LIBRETRANSLATE, Action.DETECT, 'Hola', 'en', 'K')
    )

    assert result.ok
    assert result.text == 'es'

import io
import json

import pytest

from chat_translate.plugin_main import PluginMain


@pytest.fixture
def plugin(tmp_path):
    return PluginMain({'logging': {'level': 'DEBUG', 'log_file': str(tmp_path / 'plugin.log')}})


def run_lines(plugin, *lines):
    stdout = io.StringIO()
    plugin.run(stdin=io.StringIO(''.join(line + '\n' for line in lines)), stdout=stdout)
    return [json.loads(line) for line in stdout.getvalue().splitlines()]


def test_info_returns_manifest(plugin):
    response = plugin.handle_request({'action': 'info'})

    assert response['success'] is True
    assert response['data']['name'] == 'Firebot Translate'
    assert response['data']['firebotVersion'] == '5'


def test_parameters_returns_schema(plugin):
    data = plugin.handle_request({'action': 'parameters'})['data']

    assert set(data) == {'api_key', 'provider', 'action', 'text', 'target', 'sendAs'}
    assert data['provider']['options'] == ['Google', 'DeepL', 'LibreTranslate']
    assert data['provider']['default'] == 'DeepL'
    assert data['action']['options'] == ['detect', 'translate']
    assert data['text']['default'] == '$arg[all]'
    assert data['target']['default'] == 'en'
    assert data['sendAs']['default'] == 'bot'


def test_schema_is_a_copy(plugin):
    plugin.handle_request({'action': 'parameters'})['data']['provider']['options'].append('Bing')

    assert 'Bing' not in plugin.handle_request({'action': 'parameters'})['data']['provider']['options']


def test_unknown_request_action(plugin):
    assert plugin.handle_request({'action': 'summarize'}) == {'success': False, 'error': 'Unknown action: summarize'}


def test_run_deepl_detect(plugin):
    response = plugin.handle_request({
        'action': 'run',
        'parameters': {'provider': 'DeepL', 'action': 'detect', 'text': 'Hallo', 'sendAs': 'streamer'},
    })

    assert response == {
        'success': True,
        'effects': [{
            'chatter': 'streamer',
            'type': 'firebot:chat',
            'message': 'Detecting a language by itself is not supported by the DeepL API',
        }],
    }


def test_main_loop(plugin):
    responses = run_lines(
        plugin,
        json.dumps({'action': 'info'}),
        '',
        '{not json',
        json.dumps(['run']),
        json.dumps({'action': 'run', 'parameters': {'provider': 'Yandex', 'action': 'translate'}}),
    )

    assert len(responses) == 4
    assert responses[0]['success'] is True
    assert responses[1]['success'] is False
    assert responses[1]['error'].startswith('Invalid JSON')
    assert responses[2] == {'success': False, 'error': 'Request must be a JSON object'}
    assert responses[3]['effects'][0]['message'] == 'Invalid translation provider or action!'

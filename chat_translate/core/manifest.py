"""
宿主脚本清单和参数定义
宿主根据参数定义渲染配置界面，运行时把填写的值作为 parameters 传入
"""

import copy
from typing import Dict, Any

from .models import Provider, Action, SendAs


SCRIPT_MANIFEST = {
    'name': 'Firebot Translate',
    'description': 'A custom script to translate text using Google, DeepL or LibreTranslate',
    'author': 'Wissididom',
    'version': '1.0',
    'firebotVersion': '5',
}

DEFAULT_PARAMETERS = {
    'api_key': {
        'type': 'string',
        'default': '',
        'description': 'The API Key for the selected service',
        'secondaryDescription': (
            'Enter the API Key for Google Translate, DeepL or LibreTranslate here. '
            'Make sure that you select the correct provider for that API Key below!'
        ),
    },
    'provider': {
        'type': 'enum',
        'default': Provider.DEEPL.value,
        'description': 'Provider',
        'secondaryDescription': 'The provider used for the translation or detection',
        'options': [p.value for p in Provider],
    },
    'action': {
        'type': 'enum',
        'default': Action.TRANSLATE.value,
        'description': 'Action',
        'secondaryDescription': 'The action to take. Can be either translate or detect!',
        'options': [a.value for a in Action],
    },
    'text': {
        'type': 'string',
        'default': '$arg[all]',
        'description': 'Text',
        'secondaryDescription': 'The text you want to translate',
    },
    'target': {
        'type': 'string',
        'default': 'en',
        'description': 'Target',
        'secondaryDescription': (
            'The language you want to translate to. '
            'See https://cloud.google.com/translate/docs/languages for Google and '
            'https://developers.deepl.com/docs/resources/supported-languages#target-languages for DeepL'
        ),
    },
    'sendAs': {
        'type': 'enum',
        'default': SendAs.BOT.value,
        'description': 'Send the chat message as',
        'secondaryDescription': "'bot' has no effect if no bot user is set up",
        'options': [s.value for s in SendAs],
    },
}


def get_script_manifest() -> Dict[str, Any]:
    return dict(SCRIPT_MANIFEST)


def get_default_parameters() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_PARAMETERS)


def apply_defaults(parameters: Dict[str, Any]) -> Dict[str, Any]:
    """
    用参数定义中的默认值补全缺失的参数

    Args:
        parameters: 宿主传入的参数

    Returns:
        补全后的新字典
    """
    merged = {name: definition['default'] for name, definition in DEFAULT_PARAMETERS.items()}
    merged.update({k: v for k, v in (parameters or {}).items() if v is not None})
    return merged

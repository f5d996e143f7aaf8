"""翻译器模块

提供 Google、DeepL 和 LibreTranslate 三种翻译服务商的支持。
"""

from .base_translator import BaseTranslator
from .google_translator import GoogleTranslator
from .deepl_translator import DeepLTranslator
from .libre_translator import LibreTranslator
from .translator_manager import TranslatorManager, TRANSLATORS

__all__ = [
    'BaseTranslator',
    'GoogleTranslator',
    'DeepLTranslator',
    'LibreTranslator',
    'TranslatorManager',
    'TRANSLATORS',
]

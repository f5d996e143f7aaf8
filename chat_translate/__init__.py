"""Chat Translate Plugin - 聊天翻译插件"""

__version__ = "1.0.0"
__author__ = "Wissididom"
__description__ = "使用 Google、DeepL 或 LibreTranslate 检测语言或翻译文本，并把结果发送到聊天"

# 导出主要的类和函数
from .core import (
    Action, Provider, ResultStatus, SendAs, TranslationRequest, TranslationResult, load_config
)
from .translators import (
    BaseTranslator, DeepLTranslator, GoogleTranslator, LibreTranslator, TranslatorManager
)
from .web import AsyncRequest

__all__ = [
    # 核心模块
    'Action',
    'Provider',
    'ResultStatus',
    'SendAs',
    'TranslationRequest',
    'TranslationResult',
    'load_config',
    # 翻译器
    'BaseTranslator',
    'DeepLTranslator',
    'GoogleTranslator',
    'LibreTranslator',
    'TranslatorManager',
    # HTTP 客户端
    'AsyncRequest',
]

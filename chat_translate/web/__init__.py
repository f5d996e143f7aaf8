"""Web 模块 - HTTP 客户端和异常"""

from .exceptions import *
from .request import AsyncRequest, ProviderResponse

__all__ = ['AsyncRequest', 'ProviderResponse', 'TranslatorError', 'ProviderResponseError',
           'TransportError', 'RequestSetupError', 'InvalidResponseError',
           'UnsupportedActionError', 'UnknownProviderError', 'SourceDetectionError']

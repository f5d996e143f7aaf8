"""
翻译请求相关的异常
所有异常都带有中英双语消息，由 ErrorHandler 统一分类
"""

from typing import Any, Dict, Optional

__all__ = ['TranslatorError', 'ProviderResponseError', 'TransportError',
           'RequestSetupError', 'InvalidResponseError', 'UnsupportedActionError',
           'UnknownProviderError', 'SourceDetectionError']


class TranslatorError(Exception):
    """所有翻译相关异常的基类（支持双语消息）"""

    def __init__(self, message_zh: str, message_en: str = None, *args):
        """
        初始化异常

        Args:
            message_zh: 中文错误消息
            message_en: 英文错误消息（可选，默认使用中文消息）
            *args: 其他参数
        """
        self.message_zh = message_zh
        self.message_en = message_en or message_zh
        super().__init__(message_zh, *args)

    def get_message(self, locale: str = 'zh') -> str:
        """
        获取指定语言的消息

        Args:
            locale: 语言代码（'zh' 或 'en'）

        Returns:
            对应语言的错误消息
        """
        return self.message_zh if locale == 'zh' else self.message_en


class ProviderResponseError(TranslatorError):
    """服务商返回了非 200 状态码"""

    def __init__(self, provider: str, status: int, body: str = "",
                 headers: Optional[Dict[str, str]] = None, *args):
        """
        Args:
            provider: 服务商名称（如 'Google', 'DeepL'）
            status: HTTP 状态码
            body: 原始响应内容
            headers: 响应头
        """
        message_zh = f"{provider}: 服务商返回状态码 {status}"
        message_en = f"{provider}: Provider responded with status {status}"
        super().__init__(message_zh, message_en, *args)
        self.provider = provider
        self.status = status
        self.body = body
        self.headers = headers or {}


class TransportError(TranslatorError):
    """请求已发出但没有收到响应（连接错误、超时）"""

    def __init__(self, provider: str, method: str, url: str, reason: str = "", *args):
        message_zh = f"{provider}: 未收到响应: {method} {url}"
        message_en = f"{provider}: No response received: {method} {url}"
        if reason:
            message_zh = f"{message_zh} ({reason})"
            message_en = f"{message_en} ({reason})"
        super().__init__(message_zh, message_en, *args)
        self.provider = provider
        self.method = method
        self.url = url
        self.reason = reason


class RequestSetupError(TranslatorError):
    """请求发出之前出错（URL 无效、参数无法序列化等）"""

    def __init__(self, message_zh: str = "请求构建失败", message_en: str = "Request setup failed", *args):
        super().__init__(message_zh, message_en, *args)


class InvalidResponseError(TranslatorError):
    """状态码为 200，但响应内容不是预期的 JSON 结构"""

    def __init__(self, provider: str, detail: str, payload: Any = None, *args):
        message_zh = f"{provider}: 响应格式异常: {detail}"
        message_en = f"{provider}: Unexpected response format: {detail}"
        super().__init__(message_zh, message_en, *args)
        self.provider = provider
        self.payload = payload


class UnsupportedActionError(TranslatorError):
    """服务商不支持该操作（不是错误，消息会直接发到聊天）"""

    def __init__(self, provider: str, action: str, message_en: str, *args):
        message_zh = f"{provider} 不支持操作: {action}"
        super().__init__(message_zh, message_en, *args)
        self.provider = provider
        self.action = action


class UnknownProviderError(TranslatorError):
    """参数中的服务商或操作不在可选范围内"""

    def __init__(self, field: str, value: Any, *args):
        """
        Args:
            field: 参数名（'provider' 或 'action'）
            value: 收到的值
        """
        message_zh = f"无效的参数 {field}: {value!r}"
        message_en = f"Invalid {field}: {value!r}"
        super().__init__(message_zh, message_en, *args)
        self.field = field
        self.value = value


class SourceDetectionError(TranslatorError):
    """翻译前的源语言检测失败，翻译请求被中止"""

    def __init__(self, provider: str, result: Any, *args):
        """
        Args:
            provider: 服务商名称
            result: 检测步骤返回的 TranslationResult
        """
        message_zh = f"{provider}: 源语言检测失败，已中止翻译"
        message_en = f"{provider}: Source language detection failed, translation aborted"
        super().__init__(message_zh, message_en, *args)
        self.provider = provider
        self.result = result

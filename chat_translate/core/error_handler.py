"""
错误处理核心模块
提供错误分类、双语消息生成、建议生成和按类别记录日志
"""

import logging
from typing import Dict, List, Optional, Any
from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime

from ..web.exceptions import (
    TranslatorError, ProviderResponseError, TransportError,
    InvalidResponseError, UnknownProviderError
)


logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """错误分类枚举（值与 ResultStatus 对应）"""
    PROVIDER_ERROR = "provider_error"
    TRANSPORT_ERROR = "transport_error"
    SETUP_ERROR = "setup_error"
    INVALID_RESPONSE = "invalid_response"
    NOT_DISPATCHED = "not_dispatched"


@dataclass
class StructuredError:
    """结构化错误对象（用于 JSON 序列化）"""
    category: ErrorCategory
    provider: str
    action: str
    message_zh: str
    message_en: str
    suggestions_zh: List[str] = field(default_factory=list)
    suggestions_en: List[str] = field(default_factory=list)
    http_status: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（用于 JSON 序列化）"""
        return {
            'category': self.category.value,
            'provider': self.provider,
            'action': self.action,
            'message': {
                'zh': self.message_zh,
                'en': self.message_en
            },
            'suggestions': {
                'zh': self.suggestions_zh,
                'en': self.suggestions_en
            },
            'http_status': self.http_status,
            'timestamp': self.timestamp.isoformat()
        }


class ErrorHandler:
    """错误处理器 - 负责错误分类、日志记录和建议生成"""

    def __init__(self, config: Optional[Dict[str, Any]] = None, logger: logging.Logger = None):
        """
        初始化错误处理器

        Args:
            config: 配置字典
            logger: 日志记录器（可选）
        """
        self.config = config or {}
        self.logger = logger or logging.getLogger(__name__)

    def handle_exception(self, exception: Exception, provider: str, action: str) -> StructuredError:
        """
        处理异常，生成结构化错误

        Args:
            exception: 捕获的异常
            provider: 服务商名称
            action: 操作名称

        Returns:
            StructuredError 对象
        """
        # 1. 错误分类
        category = self._categorize_error(exception)
        http_status = exception.status if isinstance(exception, ProviderResponseError) else None

        # 2. 获取双语消息
        if isinstance(exception, TranslatorError):
            message_zh = exception.message_zh
            message_en = exception.message_en
        else:
            message_zh = str(exception)
            message_en = str(exception)

        # 3. 生成建议
        suggestions_zh, suggestions_en = self._generate_suggestions(category, provider, http_status)

        # 4. 记录日志
        self._log_error(exception, category)

        return StructuredError(
            category=category,
            provider=provider,
            action=action,
            message_zh=message_zh,
            message_en=message_en,
            suggestions_zh=suggestions_zh,
            suggestions_en=suggestions_en,
            http_status=http_status
        )

    def _categorize_error(self, exception: Exception) -> ErrorCategory:
        """
        错误分类逻辑

        服务商返回了响应、请求已发出但无响应、请求未发出，这三类必须区分开
        """
        if isinstance(exception, ProviderResponseError):
            return ErrorCategory.PROVIDER_ERROR
        elif isinstance(exception, TransportError):
            return ErrorCategory.TRANSPORT_ERROR
        elif isinstance(exception, InvalidResponseError):
            return ErrorCategory.INVALID_RESPONSE
        elif isinstance(exception, UnknownProviderError):
            return ErrorCategory.NOT_DISPATCHED
        # RequestSetupError 以及其他任何请求前的异常
        return ErrorCategory.SETUP_ERROR

    def _generate_suggestions(
        self,
        category: ErrorCategory,
        provider: str,
        http_status: Optional[int] = None
    ) -> tuple[List[str], List[str]]:
        """
        生成可操作的建议

        Returns:
            (中文建议列表, 英文建议列表)
        """
        if category == ErrorCategory.PROVIDER_ERROR:
            if http_status in (401, 403):
                return (
                    [f'🔐 检查 {provider} 的 API 密钥', '✅ 确认选择的服务商与密钥匹配'],
                    [f'🔐 Check the {provider} API key', '✅ Make sure the provider matches the key']
                )
            elif http_status in (429, 456):
                return (
                    [f'⏳ {provider} 配额已用完或请求过于频繁', '🔄 稍后重试'],
                    [f'⏳ {provider} quota exceeded or rate limited', '🔄 Try again later']
                )
            elif http_status and http_status >= 500:
                return (
                    [f'⚠️ {provider} 服务器错误', '🔄 稍后重试或换其他服务商'],
                    [f'⚠️ {provider} server error', '🔄 Retry or switch provider']
                )
            return (
                ['🌐 检查目标语言代码是否被该服务商支持'],
                ['🌐 Check that the target language code is supported by the provider']
            )

        elif category == ErrorCategory.TRANSPORT_ERROR:
            proxy_server = self.config.get('network', {}).get('proxy_server')
            if proxy_server:
                return (
                    [f'🔧 当前代理: {proxy_server}', '✅ 确认代理正常运行'],
                    [f'🔧 Current proxy: {proxy_server}', '✅ Ensure proxy is running']
                )
            return (
                ['🔌 检查网络连接', '🔄 稍后重试'],
                ['🔌 Check network connection', '🔄 Try again later']
            )

        elif category == ErrorCategory.INVALID_RESPONSE:
            return (
                ['⚙️ 确认配置中的服务地址指向正确的服务商'],
                ['⚙️ Make sure the configured endpoint belongs to the provider']
            )

        elif category == ErrorCategory.NOT_DISPATCHED:
            return (
                ['📋 请选择 Google、DeepL 或 LibreTranslate，操作为 detect 或 translate'],
                ['📋 Choose Google, DeepL or LibreTranslate with detect or translate']
            )

        else:  # SETUP_ERROR
            return (
                ['⚙️ 检查配置文件中的服务地址', '📋 查看日志了解详情'],
                ['⚙️ Check the endpoint URLs in the config file', '📋 Check logs for details']
            )

    def _log_error(self, exception: Exception, category: ErrorCategory):
        """
        记录错误日志

        - 服务商错误：响应内容、状态码、响应头
        - 传输错误：请求本身
        - 其他：错误消息
        """
        if isinstance(exception, ProviderResponseError):
            if 200 <= exception.status < 300:
                # 2xx 但不是 200，只记录响应内容
                self.logger.info(exception.body)
                return
            self.logger.error(exception.body)
            self.logger.error(exception.status)
            self.logger.error(exception.headers)
        elif isinstance(exception, TransportError):
            self.logger.error(f"{exception.method} {exception.url}")
            if exception.reason:
                self.logger.error(exception.reason)
        elif isinstance(exception, InvalidResponseError):
            self.logger.error(f"[{category.value}] {exception}")
            self.logger.error(exception.payload)
        elif isinstance(exception, UnknownProviderError):
            self.logger.warning(f"[{category.value}] {exception.message_en}")
        else:
            self.logger.error("Error %s", exception)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Exception details:", exc_info=exception)

"""翻译器基类

定义翻译器的抽象接口，所有服务商实现必须继承此类。
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

from ..core.error_handler import ErrorHandler
from ..core.models import Action, ResultStatus, TranslationResult
from ..web.exceptions import (
    InvalidResponseError, ProviderResponseError, SourceDetectionError,
    UnsupportedActionError
)
from ..web.request import AsyncRequest

logger = logging.getLogger(__name__)


class BaseTranslator(ABC):
    """翻译器抽象基类"""

    # 对应 config['providers'] 下的键
    config_key = ""

    def __init__(self, config: Optional[Dict[str, Any]] = None, request: Optional[AsyncRequest] = None):
        """初始化翻译器

        Args:
            config: 插件配置字典
            request: HTTP 请求对象（可选，默认按 config 创建）
        """
        self.config = config or {}
        self.provider_config = self.config.get('providers', {}).get(self.config_key, {})
        self.request = request or AsyncRequest(self.config, provider=self.get_name())
        self.error_handler = ErrorHandler(self.config)

    async def process(self, api_key: str, action: Action, text: str, target: str) -> TranslationResult:
        """执行一次检测或翻译，所有异常都在这里转换为结果

        Args:
            api_key: API 密钥
            action: 操作类型
            text: 要处理的文本
            target: 目标语言代码

        Returns:
            TranslationResult，永远不抛出 TranslatorError
        """
        try:
            if action == Action.DETECT:
                result = await self.detect(api_key, text)
            else:
                result = await self.translate(api_key, text, target)
            logger.debug(f"{self.get_name()} {action.value} 成功: {text[:50]}... -> {str(result)[:50]}...")
            return TranslationResult.success(result)

        except UnsupportedActionError as e:
            logger.info(e.message_zh)
            return TranslationResult.unsupported(e.message_en)

        except SourceDetectionError as e:
            # 检测步骤已经记录过日志，直接沿用它的结果
            return TranslationResult.failure(e.result.status, e.result.error)

        except Exception as e:
            error = self.error_handler.handle_exception(e, self.get_name(), action.value)
            return TranslationResult.failure(ResultStatus(error.category.value), error)

    @abstractmethod
    async def detect(self, api_key: str, text: str) -> str:
        """检测文本的语言

        Returns:
            语言代码
        """
        pass

    @abstractmethod
    async def translate(self, api_key: str, text: str, target: str) -> str:
        """翻译文本

        Returns:
            译文
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """获取服务商名称"""
        pass

    async def _post_json(self, url: str, **kwargs) -> Any:
        """发送 POST 请求并解析 JSON，状态码不是 200 时抛出 ProviderResponseError"""
        response = await self.request.post(url, **kwargs)
        if response.status != 200:
            raise ProviderResponseError(self.get_name(), response.status, response.text, response.headers)
        return response.json()

    def _extract(self, payload: Any, *path) -> str:
        """按路径取出响应中的字段

        Args:
            payload: 解析后的 JSON
            *path: 键名或下标

        Raises:
            InvalidResponseError: 路径不存在
        """
        value = payload
        for key in path:
            try:
                value = value[key]
            except (KeyError, IndexError, TypeError):
                location = ".".join(str(p) for p in path)
                raise InvalidResponseError(self.get_name(), f"missing {location}", payload) from None
        return value

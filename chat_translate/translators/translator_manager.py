"""翻译管理器

按服务商选择翻译器，执行一次调用，并把结果包装成宿主的聊天效果。
"""

import logging
from typing import Optional, Dict, Any, Type

from ..core.error_handler import ErrorHandler
from ..core.manifest import apply_defaults
from ..core.models import (
    ChatEffect, Provider, ResultStatus, RunResult, SendAs,
    TranslationRequest, TranslationResult, parse_choice
)
from ..web.exceptions import UnknownProviderError
from .base_translator import BaseTranslator
from .deepl_translator import DeepLTranslator
from .google_translator import GoogleTranslator
from .libre_translator import LibreTranslator

logger = logging.getLogger(__name__)


TRANSLATORS: Dict[Provider, Type[BaseTranslator]] = {
    Provider.GOOGLE: GoogleTranslator,
    Provider.DEEPL: DeepLTranslator,
    Provider.LIBRETRANSLATE: LibreTranslator,
}


class TranslatorManager:
    """翻译管理器"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """初始化翻译管理器

        Args:
            config: 插件配置字典
        """
        self.config = config or {}
        self.error_handler = ErrorHandler(self.config)
        self._translators: Dict[Provider, BaseTranslator] = {}

    def get_translator(self, provider: Provider) -> BaseTranslator:
        """获取服务商对应的翻译器（按需创建）"""
        if provider not in self._translators:
            self._translators[provider] = TRANSLATORS[provider](self.config)
        return self._translators[provider]

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """执行一次翻译请求

        Args:
            request: 翻译请求

        Returns:
            TranslationResult
        """
        translator = self.get_translator(request.provider)
        logger.info(f"使用 {translator.get_name()} 执行 {request.action.value}")
        return await translator.process(request.api_key, request.action, request.text, request.target)

    async def translate_parameters(self, parameters: Dict[str, Any]) -> TranslationResult:
        """从宿主参数执行一次翻译，provider 或 action 无效时不发出任何请求"""
        try:
            request = TranslationRequest.from_parameters(parameters)
        except UnknownProviderError as e:
            error = self.error_handler.handle_exception(
                e, str(parameters.get('provider')), str(parameters.get('action'))
            )
            return TranslationResult.failure(ResultStatus.NOT_DISPATCHED, error)
        return await self.translate(request)

    async def run(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """宿主的运行入口

        Args:
            parameters: 宿主传入的参数（api_key, provider, action, text, target, sendAs）

        Returns:
            {'success': True, 'effects': [{'chatter': ..., 'type': 'firebot:chat', 'message': ...}]}
        """
        parameters = apply_defaults(parameters)
        result = await self.translate_parameters(parameters)

        try:
            chatter = parse_choice(SendAs, 'sendAs', parameters.get('sendAs')).value
        except UnknownProviderError as e:
            logger.warning(f"{e.message_en}, sending as {SendAs.BOT.value}")
            chatter = SendAs.BOT.value

        if result.text is None:
            logger.info(f"无可用结果 ({result.status.value})，发送兜底消息")

        return RunResult(effects=[ChatEffect(chatter=chatter, message=result.message())]).to_dict()

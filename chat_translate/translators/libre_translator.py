"""LibreTranslate 翻译器

LibreTranslate 翻译时需要源语言，所以 translate 会先调用一次 detect，
一次翻译共发出两个请求。
"""

import logging

from ..core.models import Action, Provider
from ..web.exceptions import SourceDetectionError
from .base_translator import BaseTranslator

logger = logging.getLogger(__name__)


class LibreTranslator(BaseTranslator):
    """LibreTranslate 翻译器实现"""

    config_key = "libretranslate"

    @property
    def detect_url(self) -> str:
        return self.provider_config.get("detect_url", "https://libretranslate.de/detect")

    @property
    def translate_url(self) -> str:
        return self.provider_config.get("translate_url", "https://libretranslate.de/translate")

    @property
    def propagate_null_source(self) -> bool:
        """检测失败时是否仍以 source=null 继续翻译"""
        return bool(self.provider_config.get("propagate_null_source", False))

    async def detect(self, api_key: str, text: str) -> str:
        """检测语言

        返回格式: [{"confidence": 90.0, "language": "de"}]
        """
        data = await self._post_json(self.detect_url, data={"q": text, "api_key": api_key})
        return self._extract(data, 0, "language")

    async def translate(self, api_key: str, text: str, target: str) -> str:
        """先检测源语言再翻译

        返回格式: {"translatedText": "..."}
        """
        detection = await self.process(api_key, Action.DETECT, text, target)
        if detection.ok:
            source = detection.text
        elif self.propagate_null_source:
            logger.warning("LibreTranslate 源语言检测失败，使用 source=null 继续翻译")
            source = "null"
        else:
            raise SourceDetectionError(self.get_name(), detection)

        data = await self._post_json(
            self.translate_url,
            data={"q": text, "source": source, "target": target, "format": "text", "key": api_key},
        )
        return self._extract(data, "translatedText")

    def get_name(self) -> str:
        """获取服务商名称"""
        return Provider.LIBRETRANSLATE.value

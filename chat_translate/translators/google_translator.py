"""Google 翻译器

使用 Google Cloud Translation API v2 实现的翻译器，需要 API 密钥。
"""

import logging
from typing import Any

from ..core.models import Provider
from .base_translator import BaseTranslator

logger = logging.getLogger(__name__)


class GoogleTranslator(BaseTranslator):
    """Google Cloud Translation v2 实现"""

    config_key = "google"

    @property
    def detect_url(self) -> str:
        return self.provider_config.get(
            "detect_url", "https://translate.googleapis.com/language/translate/v2/detect"
        )

    @property
    def translate_url(self) -> str:
        return self.provider_config.get(
            "translate_url", "https://translate.googleapis.com/language/translate/v2"
        )

    async def detect(self, api_key: str, text: str) -> str:
        """检测语言

        返回格式: {"data": {"detections": [{"language": "de", ...}]}}
        线上接口实际多嵌套一层列表: {"data": {"detections": [[{"language": "de"}]]}}
        """
        data = await self._post_json(self.detect_url, data={"q": text, "key": api_key})
        detection: Any = self._extract(data, "data", "detections", 0)
        if isinstance(detection, list):
            detection = self._extract(detection, 0)
        return self._extract(detection, "language")

    async def translate(self, api_key: str, text: str, target: str) -> str:
        """翻译文本

        返回格式: {"data": {"translations": [{"translatedText": "..."}]}}
        """
        data = await self._post_json(
            self.translate_url,
            data={"q": text, "target": target, "format": "text", "key": api_key},
        )
        return self._extract(data, "data", "translations", 0, "translatedText")

    def get_name(self) -> str:
        """获取服务商名称"""
        return Provider.GOOGLE.value

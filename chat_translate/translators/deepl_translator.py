"""DeepL 翻译器

使用 DeepL API 实现的翻译器，需要 API 密钥。
DeepL 没有单独的语言检测接口，detect 直接返回提示文本。
"""

import logging

from ..core.models import Action, Provider
from ..web.exceptions import UnsupportedActionError
from .base_translator import BaseTranslator

logger = logging.getLogger(__name__)

DETECT_NOT_SUPPORTED = "Detecting a language by itself is not supported by the DeepL API"


class DeepLTranslator(BaseTranslator):
    """DeepL 翻译器实现"""

    config_key = "deepl"

    @property
    def translate_url(self) -> str:
        return self.provider_config.get("translate_url", "https://api-free.deepl.com/v2/translate")

    async def detect(self, api_key: str, text: str) -> str:
        # 不发送任何请求
        raise UnsupportedActionError(self.get_name(), Action.DETECT.value, DETECT_NOT_SUPPORTED)

    async def translate(self, api_key: str, text: str, target: str) -> str:
        """翻译文本

        返回格式: {"translations": [{"detected_source_language": "DE", "text": "..."}]}
        """
        headers = {
            "Authorization": f"DeepL-Auth-Key {api_key}"
        }

        data = {
            "text": [text],
            "target_lang": target
        }

        result = await self._post_json(self.translate_url, json_body=data, headers=headers)
        return self._extract(result, "translations", 0, "text")

    def get_name(self) -> str:
        """获取服务商名称"""
        return Provider.DEEPL.value

"""
HTTP 请求封装（aiohttp）

"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import aiohttp

from .exceptions import InvalidResponseError, RequestSetupError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class ProviderResponse:
    """服务商的原始响应（状态码、响应头、响应文本）"""
    provider: str
    status: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """
        解析响应 JSON

        Raises:
            InvalidResponseError: 响应不是合法的 JSON
        """
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise InvalidResponseError(self.provider, f"invalid JSON ({e})", self.text) from e


class AsyncRequest:
    """
    异步 HTTP 请求封装类
    支持代理和超时，非 200 状态码不抛异常，由调用方判断
    """

    DEFAULT_HEADERS = {
        'User-Agent': 'ChatTranslate/1.0',
        'Accept': 'application/json',
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None, provider: str = ""):
        """
        初始化 AsyncRequest 对象

        Args:
            config: 配置字典，包含 network 配置
            provider: 服务商名称（用于异常和日志）
        """
        self.config = config or {}
        self.provider = provider
        network_config = self.config.get('network', {})

        self.headers = self.DEFAULT_HEADERS.copy()

        # 代理
        self.proxy = network_config.get('proxy_server') or None
        if self.proxy:
            logger.info(f"使用代理: {self.proxy}")

        # 超时（秒）
        self.timeout = network_config.get('timeout', 30)

    async def post(self, url: str, data: Any = None, json_body: Any = None,
                   headers: Optional[Dict[str, str]] = None) -> ProviderResponse:
        """
        发送 POST 请求

        Args:
            url: 请求 URL
            data: 表单数据（application/x-www-form-urlencoded）
            json_body: JSON 数据
            headers: 额外的请求头

        Returns:
            ProviderResponse 对象（任何状态码）

        Raises:
            RequestSetupError: 请求发出之前出错
            TransportError: 请求已发出但没有收到响应
        """
        scheme = urlparse(url).scheme
        if scheme not in ('http', 'https'):
            raise RequestSetupError(
                f"不支持的 URL: {url!r}",
                f"Unsupported URL: {url!r}"
            )

        merged_headers = self.headers.copy()
        if headers:
            merged_headers.update(headers)

        kwargs: Dict[str, Any] = {'headers': merged_headers}
        if data is not None:
            kwargs['data'] = data
        if json_body is not None:
            kwargs['json'] = json_body
        if self.proxy:
            kwargs['proxy'] = self.proxy

        logger.debug(f"POST {url}")
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.post(url, **kwargs) as response:
                    text = await response.text()
                    return ProviderResponse(
                        provider=self.provider,
                        status=response.status,
                        text=text,
                        headers=dict(response.headers),
                    )

        except aiohttp.InvalidURL as e:
            raise RequestSetupError(
                f"无效的 URL: {url}",
                f"Invalid URL: {url}"
            ) from e
        except asyncio.TimeoutError as e:
            raise TransportError(self.provider, 'POST', url, 'timeout') from e
        except aiohttp.ClientError as e:
            raise TransportError(self.provider, 'POST', url, str(e)) from e
        except (TypeError, ValueError) as e:
            # 参数无法序列化，请求没有发出
            raise RequestSetupError(
                f"请求构建失败: {e}",
                f"Request setup failed: {e}"
            ) from e

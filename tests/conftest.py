"""
测试公共夹具

FakeProvider 是一个本地 aiohttp 服务，模拟三家服务商的接口，
记录收到的每个请求，并按路径返回预设的响应。
"""

import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


class FakeProvider:
    """本地模拟的翻译服务"""

    def __init__(self):
        self.requests = []
        self.responses = {}
        self.server = None

    def respond(self, path, body, status=200, headers=None, delay=0):
        """设置某个路径的响应"""
        self.responses[path] = (status, body, headers or {}, delay)

    def url(self, path):
        return str(self.server.make_url(path))

    @property
    def paths(self):
        return [r['path'] for r in self.requests]

    async def handler(self, request):
        entry = {'path': request.path, 'headers': dict(request.headers)}
        if request.content_type == 'application/json':
            entry['json'] = await request.json()
        else:
            entry['form'] = dict(await request.post())
        self.requests.append(entry)

        status, body, headers, delay = self.responses.get(
            request.path, (404, {'error': 'not found'}, {}, 0)
        )
        if delay:
            await asyncio.sleep(delay)
        if isinstance(body, str):
            return web.Response(status=status, text=body, headers=headers)
        return web.json_response(body, status=status, headers=headers)


@pytest.fixture
async def fake_provider():
    provider = FakeProvider()
    app = web.Application()
    app.router.add_post('/{tail:.*}', provider.handler)
    server = TestServer(app)
    await server.start_server()
    provider.server = server
    yield provider
    await server.close()


@pytest.fixture
def config(fake_provider):
    """所有服务商地址都指向 FakeProvider 的配置"""
    return {
        'network': {'timeout': 5},
        'providers': {
            'google': {
                'detect_url': fake_provider.url('/language/translate/v2/detect'),
                'translate_url': fake_provider.url('/language/translate/v2'),
            },
            'deepl': {
                'translate_url': fake_provider.url('/v2/translate'),
            },
            'libretranslate': {
                'detect_url': fake_provider.url('/detect'),
                'translate_url': fake_provider.url('/translate'),
                'propagate_null_source': False,
            },
        },
    }

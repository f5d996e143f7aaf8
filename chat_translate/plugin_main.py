#!/usr/bin/env python3
"""
Chat Translate Plugin - 主入口
通过 stdin/stdout 与宿主通信，每行一个 JSON 请求/响应
"""

import sys
import json
import logging
import asyncio
import io
from typing import Dict, Any, Optional, TextIO

from .core.config_loader import load_config
from .core.manifest import get_default_parameters, get_script_manifest
from .translators import TranslatorManager


class PluginMain:
    """插件主入口"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """初始化插件

        Args:
            config: 配置字典（可选，默认从 config.yml 加载）
        """
        self.config = config if config is not None else load_config()

        # 设置日志（写入文件，避免干扰 stdout）
        self._setup_logging()

        self.manager = TranslatorManager(self.config)

        self.logger.info("Plugin initialized")

    def _setup_logging(self):
        """设置日志"""
        log_config = self.config.get('logging', {})
        log_level = log_config.get('level', 'INFO')
        log_file = log_config.get('log_file', 'chat_translate.log')
        log_format = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        logging.basicConfig(
            level=getattr(logging, log_level),
            format=log_format,
            filename=log_file,
            filemode='a',
            encoding='utf-8'
        )

        self.logger = logging.getLogger(__name__)

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """运行插件主循环"""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        self.logger.info("Plugin started")

        try:
            while True:
                line = stdin.readline()
                if not line:
                    break

                line = line.strip()
                if not line:
                    continue

                try:
                    request = json.loads(line)
                    self.logger.debug(f"Received request: {request}")
                    response = self.handle_request(request)

                except json.JSONDecodeError as e:
                    self.logger.error(f"JSON decode error: {e}")
                    response = {
                        'success': False,
                        'error': f'Invalid JSON: {str(e)}'
                    }

                except Exception as e:
                    self.logger.exception(f"Unexpected error: {e}")
                    response = {
                        'success': False,
                        'error': f'Internal error: {str(e)}'
                    }

                print(json.dumps(response, ensure_ascii=False), file=stdout)
                stdout.flush()

        except KeyboardInterrupt:
            self.logger.info("Plugin interrupted by user")

        finally:
            self.logger.info("Plugin stopped")

    def handle_request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        处理请求

        Args:
            request: 请求字典，包含 action 字段

        Returns:
            响应字典
        """
        if not isinstance(request, dict):
            return {
                'success': False,
                'error': 'Request must be a JSON object'
            }

        action = request.get('action')

        if action == 'info':
            return {'success': True, 'data': get_script_manifest()}
        elif action == 'parameters':
            return {'success': True, 'data': get_default_parameters()}
        elif action == 'run':
            return self._handle_run(request)
        else:
            return {
                'success': False,
                'error': f'Unknown action: {action}'
            }

    def _handle_run(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        执行一次翻译

        Args:
            request: 请求字典，包含：
                - parameters: 宿主参数（api_key, provider, action, text, target, sendAs）

        Returns:
            {'success': True, 'effects': [...]}
        """
        parameters = request.get('parameters') or {}
        self.logger.info(f"Run: provider={parameters.get('provider')}, action={parameters.get('action')}")
        return asyncio.run(self.manager.run(parameters))


def main():
    """主函数"""
    # stdin/stdout 统一使用 UTF-8
    sys.stdin = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8')
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', line_buffering=True)

    try:
        plugin = PluginMain()
    except RuntimeError as e:
        print(json.dumps({'success': False, 'error': str(e)}, ensure_ascii=False))
        sys.exit(1)
    plugin.run()


if __name__ == '__main__':
    main()

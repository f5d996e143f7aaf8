#!/usr/bin/env python3
"""
Chat Translate Plugin Entry Point
插件入口文件，用于启动插件主程序

    python -m chat_translate.run_plugin
"""

from chat_translate.plugin_main import main

if __name__ == '__main__':
    main()

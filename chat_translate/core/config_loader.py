"""
配置加载器
从 config.yml 加载插件配置
"""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_file: str = "config/config.yml") -> Dict[str, Any]:
    """
    加载配置文件

    Args:
        config_file: 配置文件路径（相对于插件根目录，也可以是绝对路径）

    Returns:
        配置字典（缺少的项使用默认值）
    """
    # 获取插件根目录（core 的父目录）
    plugin_root = Path(__file__).parent.parent
    config_path = plugin_root / config_file

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        return _get_default_config()
    except Exception as e:
        raise RuntimeError(f"配置文件加载失败: {e}")

    return _merge(_get_default_config(), config or {})


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """递归合并配置，override 中的值优先"""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _get_default_config() -> Dict[str, Any]:
    """返回默认配置"""
    return {
        'network': {
            'proxy_server': None,
            'timeout': 30
        },
        'providers': {
            'google': {
                'detect_url': 'https://translate.googleapis.com/language/translate/v2/detect',
                'translate_url': 'https://translate.googleapis.com/language/translate/v2'
            },
            'deepl': {
                'translate_url': 'https://api-free.deepl.com/v2/translate'
            },
            'libretranslate': {
                'detect_url': 'https://libretranslate.de/detect',
                'translate_url': 'https://libretranslate.de/translate',
                'propagate_null_source': False
            }
        },
        'logging': {
            'level': 'INFO',
            'log_file': 'chat_translate.log',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }
    }

"""
核心数据模型
包含一次调用中用到的请求、结果和聊天效果结构
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, List

from ..web.exceptions import UnknownProviderError


# 结果为空时发送到聊天的兜底消息
FALLBACK_MESSAGE = "Invalid translation provider or action!"

# 宿主的聊天消息效果类型
CHAT_EFFECT_TYPE = "firebot:chat"


class Provider(Enum):
    """翻译服务商（值与宿主选项字符串一致）"""
    GOOGLE = "Google"
    DEEPL = "DeepL"
    LIBRETRANSLATE = "LibreTranslate"


class Action(Enum):
    """操作类型"""
    DETECT = "detect"
    TRANSLATE = "translate"


class SendAs(Enum):
    """聊天消息的发送者"""
    STREAMER = "streamer"
    BOT = "bot"


class ResultStatus(Enum):
    """翻译结果状态"""
    SUCCESS = "success"
    UNSUPPORTED = "unsupported"
    PROVIDER_ERROR = "provider_error"
    TRANSPORT_ERROR = "transport_error"
    SETUP_ERROR = "setup_error"
    INVALID_RESPONSE = "invalid_response"
    NOT_DISPATCHED = "not_dispatched"


def _unwrap(value: Any) -> Any:
    """宿主的枚举参数可能以单元素列表传入"""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def parse_choice(enum_cls, field_name: str, value: Any):
    """
    把参数值解析为枚举成员

    Args:
        enum_cls: 枚举类
        field_name: 参数名（用于错误消息）
        value: 参数值

    Returns:
        枚举成员

    Raises:
        UnknownProviderError: 值不在可选范围内
    """
    raw = _unwrap(value)
    try:
        return enum_cls(raw)
    except ValueError:
        raise UnknownProviderError(field_name, raw) from None


@dataclass(frozen=True)
class TranslationRequest:
    """
    一次翻译调用的请求（不可变）

    字段：
        provider: 翻译服务商
        action: 操作（检测或翻译）
        text: 要处理的文本（不校验）
        target: 目标语言代码（各服务商词汇不同，不校验）
        api_key: API 密钥
    """
    provider: Provider
    action: Action
    text: str
    target: str
    api_key: str = ""

    @classmethod
    def from_parameters(cls, parameters: Dict[str, Any]) -> 'TranslationRequest':
        """
        从宿主参数构建请求

        Raises:
            UnknownProviderError: provider 或 action 无效
        """
        return cls(
            provider=parse_choice(Provider, 'provider', parameters.get('provider')),
            action=parse_choice(Action, 'action', parameters.get('action')),
            text=parameters.get('text') or "",
            target=parameters.get('target') or "",
            api_key=parameters.get('api_key') or "",
        )


@dataclass
class TranslationResult:
    """
    翻译结果

    status 区分成功、不支持的操作和各类失败；
    text 为检测到的语言代码、译文，或不支持操作时的提示文本
    """
    status: ResultStatus
    text: Optional[str] = None
    error: Optional[Any] = None  # StructuredError

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS

    def message(self, fallback: str = FALLBACK_MESSAGE) -> str:
        """聊天中显示的消息，没有文本时使用兜底消息"""
        return self.text if self.text is not None else fallback

    @classmethod
    def success(cls, text: str) -> 'TranslationResult':
        return cls(ResultStatus.SUCCESS, text=text)

    @classmethod
    def unsupported(cls, text: str) -> 'TranslationResult':
        return cls(ResultStatus.UNSUPPORTED, text=text)

    @classmethod
    def failure(cls, status: ResultStatus, error: Any = None) -> 'TranslationResult':
        return cls(status, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'text': self.text,
            'error': self.error.to_dict() if self.error is not None else None,
        }


@dataclass
class ChatEffect:
    """宿主的聊天消息效果"""
    chatter: str
    message: str
    type: str = CHAT_EFFECT_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'chatter': self.chatter,
            'type': self.type,
            'message': self.message,
        }


@dataclass
class RunResult:
    """返回给宿主的运行结果（始终 success=True）"""
    effects: List[ChatEffect] = field(default_factory=list)
    success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'effects': [effect.to_dict() for effect in self.effects],
        }

"""
核心模块
"""

from .config_loader import load_config
from .error_handler import ErrorCategory, ErrorHandler, StructuredError
from .manifest import get_default_parameters, get_script_manifest
from .models import (
    Action, ChatEffect, Provider, ResultStatus, RunResult, SendAs,
    TranslationRequest, TranslationResult,
)

__all__ = [
    'load_config',
    'ErrorCategory',
    'ErrorHandler',
    'StructuredError',
    'get_default_parameters',
    'get_script_manifest',
    'Action',
    'ChatEffect',
    'Provider',
    'ResultStatus',
    'RunResult',
    'SendAs',
    'TranslationRequest',
    'TranslationResult',
]

# dynafunc/config/__init__.py
"""
dynafunc Configuration

Design principles:
1. Code has defaults, YAML is optional input
2. Configuration objects are frozen
"""

from .conversion import ConversionConfig
from .loader import DynaFuncConfig, load_config

__all__ = [
    "ConversionConfig",
    "DynaFuncConfig",
    "load_config",
]

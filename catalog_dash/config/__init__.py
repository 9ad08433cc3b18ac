"""
Configuration layer: global.json parsing and data path resolution.
"""

from .model import GlobalConfig
from .loader import load_global_config, resolve_data_path

__all__ = ["GlobalConfig", "load_global_config", "resolve_data_path"]

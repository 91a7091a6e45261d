"""
GFAWeaver v0.1.0

Configuration management for GFAWeaver.

Author: GFAWeaver Development Team
License: MIT
"""

from .schema import DEFAULT_CONFIG, load_config, save_config_template, validate_config

__all__ = ["DEFAULT_CONFIG", "load_config", "save_config_template", "validate_config"]

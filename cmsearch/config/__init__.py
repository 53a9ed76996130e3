#!/usr/bin/env python3
"""
cmsearch Parser Configuration Module
"""
from .manager import ConfigManager
from .schema import ConfigSchema
from .parser_config import ParserConfig
from .defaults import DEFAULT_CONFIG

__all__ = ['ConfigManager', 'ConfigSchema', 'ParserConfig', 'DEFAULT_CONFIG']

"""Core utilities for the cmsearch parser"""
from .line_source import LineSource
from .logging_config import LoggingManager

__all__ = ['LineSource', 'LoggingManager']

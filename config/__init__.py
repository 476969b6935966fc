"""
Configuration package for the menu options engine.
"""

from config.config import Config, config

__all__ = ["Config", "config"]

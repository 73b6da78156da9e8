"""Configuration module for todolist."""

from todolist.config.loader import load_config, get_config_path, save_config
from todolist.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path", "save_config"]

from .app_config import AppConfig, LogLevel, load_config

__all__ = ["AppConfig", "LogLevel", "load_config"]

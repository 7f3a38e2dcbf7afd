"""Application-wide settings and logging for the todo-pro service."""

from .config import Config, CorsConfig, ServerConfig
from .logger import setup_logger

__all__ = ["Config", "CorsConfig", "ServerConfig", "setup_logger"]

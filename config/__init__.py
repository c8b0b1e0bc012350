"""配置模块"""
from .config import ENGINE_CONFIG, SESSION_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['ENGINE_CONFIG', 'SESSION_CONFIG', 'LOGGING_CONFIG', 'validate_config']

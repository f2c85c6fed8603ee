# gmath/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – логгер "gmath" (без собственного вывода, см. logger.py)
    * Config – численные настройки по‑умолчанию (JSON)
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "Config", "DEFAULT_CONFIG"]

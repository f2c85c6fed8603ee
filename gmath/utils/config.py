"""
Простой загрузчик/сохранитель численных настроек в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(файл пишется только явным вызовом save()).

Значения не подставляются неявно – их передают явно:
    float_eq(a, b, Config()["float_eq_eps"])
    v.project_viewport(w, h, Config()["project_eps"])
"""

import json
from pathlib import Path
from gmath.utils.logger import logger

DEFAULT_CONFIG = {
    # допуск для float_eq()
    "float_eq_eps": 1e-7,
    # eps для Vec3.project_viewport() при z == 0
    "project_eps": 1e-5,
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "gmath.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить загруженный экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.debug("[Config] No config file – using defaults.")
            self.data = DEFAULT_CONFIG.copy()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value

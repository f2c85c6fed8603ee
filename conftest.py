# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: каждый тест получает «чистый» Config
(пустой рабочий каталог, без gmath.json).
"""

import pytest

from gmath.utils.config import Config


@pytest.fixture(autouse=True)
def fresh_config(tmp_path, monkeypatch):
    """Изолирует синглтон Config от файлов в текущем каталоге."""
    monkeypatch.chdir(tmp_path)
    Config.reset()
    yield tmp_path
    Config.reset()

# gmath/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Используется для диагностики (to_str() матриц,
# клэмпинг параметров, epsilon в проекции).
# Корневой логгер не трогаем – handler и level настраивает
# приложение (например, logging.basicConfig в рендере).
# ---------------------------------------------------------------

import logging


def init_logger():
    log = logging.getLogger("gmath")
    if not log.handlers:
        log.addHandler(logging.NullHandler())
    return log

logger = init_logger()

import logging
import math

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


def parse_usage(raw: str | None) -> float | None:
    """Число GB из ввода оператора; None, если ввод не конечное число или отрицательный."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        logger.debug(f"Не удалось разобрать число из ввода: {raw!r}")
        return None
    if not math.isfinite(value) or value < 0:
        logger.debug(f"Недопустимое значение расхода: {raw!r}")
        return None
    return value


def parse_index(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug(f"Не удалось разобрать номер из ввода: {raw!r}")
        return None

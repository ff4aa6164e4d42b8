# infrastructure/logging/log_setup.py
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{message}</cyan> {extra}"
)


def setup_console_logging(level: str = "INFO") -> None:
    logger.remove()
    # 標準出力はテストコードとレポート用に空けておく
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)

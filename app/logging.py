import logging
import sys

from decouple import config as dconfig
from loguru import logger

# More info: https://loguru.readthedocs.io/en/stable/api/logger.html


def configure_logger() -> None:
    level = dconfig("log_level", default="INFO", cast=str)
    log_file = dconfig("log_file", default="", cast=str)

    logger.remove()
    formatter = Formatter(level)
    logger.add(sys.stdout, level=level, format=formatter.format, colorize=True)

    if log_file is not None and log_file != "":
        logger.add(
            log_file,
            level=level,
            format=formatter.format,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

    logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    logging.getLogger("uvicorn.access").handlers = [InterceptHandler()]


class Formatter:
    def __init__(self, level: str):
        self.level = level
        self.fmt_default: str = _line_format("green")
        self.fmt_warning: str = _line_format("yellow")
        self.fmt_error: str = _line_format("red")

    def format(self, record):
        level = record["level"]
        fmt = self.fmt_default

        if level.no == 30:
            fmt = self.fmt_warning
        elif level.no > 30:
            fmt = self.fmt_error

        if record["exception"] is not None:
            return fmt + "<level>{exception}</level>\n"

        return fmt


def _line_format(color: str) -> str:
    return (
        f"<{color}>{{time:YYYY-MM-DD HH:mm:ss}}</{color}> | "
        + "<level>{level.icon}</level> | "
        + "<level>{name}:{line}</level> | "
        + "<level>{message}</level>\n"
    )


class InterceptHandler(logging.Handler):
    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(level, record.getMessage())

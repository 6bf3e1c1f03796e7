"""
Logger — структурное логирование каталога паттернов

Конфигурация structlog поверх stdlib logging.

Модули получают логгер через get_logger(__name__) при импорте.
Импорт модулей НЕ настраивает логирование: это делает приложение
(или тест) явным вызовом configure_logging().
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

import structlog


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LoggingConfig:
    """Конфигурация логирования.

    - level: уровень stdlib logging ("DEBUG", "INFO", ...)
    - json_output: True → JSONRenderer, False → ConsoleRenderer
    """

    level: str = "INFO"
    json_output: bool = False


# =============================================================================
# SETUP
# =============================================================================


def configure_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Настройка structlog и root logger.

    Args:
        config: конфигурация логирования (default: LoggingConfig())

    Returns:
        Логгер каталога после настройки

    Raises:
        ValueError: если уровень логирования неизвестен
    """
    config = config or LoggingConfig()

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger("src")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        json_output=config.json_output,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Логгер для модуля (ленивый proxy structlog)."""
    return structlog.get_logger(name)

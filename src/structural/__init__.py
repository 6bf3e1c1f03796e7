"""Structural — структурные паттерны.

- Decorator: цепочки обработчиков заказов над контрактом OrderProcessor
"""

from .decorator import (
    BasicOrderProcessor,
    LoggingOrderProcessor,
    Order,
    OrderProcessor,
    OrderProcessorDecorator,
    OrderValidationError,
    PrefixDecorator,
    SuffixDecorator,
    ValidatingOrderProcessor,
    compose,
)

__all__ = [
    "Order",
    "OrderProcessor",
    "BasicOrderProcessor",
    "OrderProcessorDecorator",
    "PrefixDecorator",
    "SuffixDecorator",
    "ValidatingOrderProcessor",
    "LoggingOrderProcessor",
    "OrderValidationError",
    "compose",
]

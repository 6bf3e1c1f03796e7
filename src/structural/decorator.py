"""
Decorator — цепочки обработчиков заказов

OrderProcessor — голый полиморфный контракт process(order) -> str.
Декоратор реализует тот же контракт, хранит ссылку на следующий
обработчик цепочки и явно делегирует ему вызов, дополняя результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Декоратор вызывает обёрнутый обработчик ровно один раз на process()
   (ValidatingOrderProcessor — ноль раз, если заказ невалиден)
2. Результат декоратора — детерминированная функция результата
   обёрнутого обработчика
3. Order неизменяем (frozen), обработчики не модифицируют вход
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from jsonschema import ValidationError
from pydantic import BaseModel, Field

from src.core.contracts import OrderValidator
from src.core.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OrderValidationError(ValueError):
    """Заказ не соответствует контракту order.json."""

    def __init__(self, order_id: str, errors: List[str]):
        super().__init__(f"Order {order_id!r} failed validation: {'; '.join(errors)}")
        self.order_id = order_id
        self.errors = errors


# =============================================================================
# ORDER
# =============================================================================


class Order(BaseModel):
    """
    Заказ — непрозрачное значение, передаваемое по цепочке обработчиков.

    Immutable (frozen=True): обработчики не могут изменить заказ.
    Полнота заказа (непустой items) проверяется контрактом order.json,
    а не моделью.
    """

    order_id: str = Field(..., min_length=1, description="Идентификатор заказа")
    items: Tuple[str, ...] = Field(default=(), description="Позиции заказа")
    total: float = Field(..., ge=0, description="Сумма заказа")

    model_config = {"frozen": True}


# =============================================================================
# PROCESSOR CONTRACT
# =============================================================================


class OrderProcessor(ABC):
    """Контракт обработчика заказа. Не хранит состояния."""

    @abstractmethod
    def process(self, order: Order) -> str:
        pass


class BasicOrderProcessor(OrderProcessor):
    """Конечный обработчик цепочки."""

    def process(self, order: Order) -> str:
        return f"Order {order.order_id} processed"


# =============================================================================
# DECORATORS
# =============================================================================


class OrderProcessorDecorator(OrderProcessor):
    """
    Базовый декоратор: делегирует wrapped и передаёт результат в decorate().

    Подклассы переопределяют decorate(); по умолчанию результат
    возвращается без изменений.
    """

    def __init__(self, wrapped: OrderProcessor):
        self._wrapped = wrapped

    @property
    def wrapped(self) -> OrderProcessor:
        return self._wrapped

    def process(self, order: Order) -> str:
        result = self._wrapped.process(order)
        return self.decorate(order, result)

    def decorate(self, order: Order, result: str) -> str:
        return result


class PrefixDecorator(OrderProcessorDecorator):
    """Добавляет prefix перед результатом."""

    def __init__(self, wrapped: OrderProcessor, prefix: str):
        super().__init__(wrapped)
        self.prefix = prefix

    def decorate(self, order: Order, result: str) -> str:
        return f"{self.prefix}{result}"


class SuffixDecorator(OrderProcessorDecorator):
    """Добавляет suffix после результата."""

    def __init__(self, wrapped: OrderProcessor, suffix: str):
        super().__init__(wrapped)
        self.suffix = suffix

    def decorate(self, order: Order, result: str) -> str:
        return f"{result}{self.suffix}"


class ValidatingOrderProcessor(OrderProcessorDecorator):
    """
    Проверка заказа по контракту order.json до делегирования.

    Невалидный заказ → OrderValidationError, обёрнутый обработчик
    не вызывается.
    """

    def __init__(self, wrapped: OrderProcessor, validator: Optional[OrderValidator] = None):
        super().__init__(wrapped)
        self._validator = validator or OrderValidator()

    def process(self, order: Order) -> str:
        data = order.model_dump(mode="json")
        errors = sorted(
            self._validator.iter_errors(data),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        if errors:
            messages = [_format_error(e) for e in errors]
            logger.warning(
                "Order rejected by contract",
                order_id=order.order_id,
                errors=messages,
            )
            raise OrderValidationError(order.order_id, messages)
        return super().process(order)


class LoggingOrderProcessor(OrderProcessorDecorator):
    """Логирует обработку заказа, результат не меняет."""

    def process(self, order: Order) -> str:
        logger.info(
            "Order processing started",
            order_id=order.order_id,
            processor=type(self._wrapped).__name__,
        )
        result = super().process(order)
        logger.info("Order processing finished", order_id=order.order_id, result=result)
        return result


def _format_error(error: ValidationError) -> str:
    path = ".".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{path}: {error.message}"


# =============================================================================
# CHAIN COMPOSITION
# =============================================================================


def compose(
    processor: OrderProcessor,
    *decorators: Callable[[OrderProcessor], OrderProcessor],
) -> OrderProcessor:
    """
    Сборка цепочки декораторов вокруг processor.

    Первый декоратор оборачивает processor (самый внутренний),
    последний — внешний.

    Example:
        >>> chain = compose(
        ...     BasicOrderProcessor(),
        ...     lambda p: PrefixDecorator(p, "[A] "),
        ...     lambda p: SuffixDecorator(p, " !"),
        ... )
        >>> chain.process(Order(order_id="42", items=("book",), total=10.0))
        '[A] Order 42 processed !'
    """
    chain = processor
    for decorator in decorators:
        chain = decorator(chain)
    return chain

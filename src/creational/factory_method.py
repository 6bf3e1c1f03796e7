"""
Factory Method — выбор конкретного продукта делегируется подтипу creator

Creator.factory_method() абстрактен и реализуется каждым подтипом;
общая логика (some_operation) использует результат одинаково для всех
подтипов. Вариативность изолирована в создании объекта.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict


# =============================================================================
# PRODUCTS
# =============================================================================


class Product(ABC):
    """Контракт продукта factory method."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProductA(Product):
    def operation(self) -> str:
        return "ConcreteProductA"


class ConcreteProductB(Product):
    def operation(self) -> str:
        return "ConcreteProductB"


# =============================================================================
# CREATORS
# =============================================================================


class Creator(ABC):
    """
    Базовый creator.

    Подтип выбирает конкретный продукт в factory_method(); форматирование
    результата в some_operation() общее.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        """Создание продукта конкретного типа."""

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: {product.operation()}"


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()


# =============================================================================
# SELECTION
# =============================================================================


class CreatorKind(str, Enum):
    """Закрытый набор вариантов creator."""

    A = "A"
    B = "B"


_CREATORS: Dict[CreatorKind, Callable[[], Creator]] = {
    CreatorKind.A: ConcreteCreatorA,
    CreatorKind.B: ConcreteCreatorB,
}


def creator_for(kind: CreatorKind) -> Creator:
    """
    Creator по виду.

    Args:
        kind: CreatorKind или его строковое значение ("A"/"B")

    Raises:
        ValueError: если вид неизвестен
    """
    return _CREATORS[CreatorKind(kind)]()

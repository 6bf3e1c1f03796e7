"""
Abstract Factory — семейства совместимых продуктов

Каждая конкретная фабрика производит одно семейство продуктов
(ConcreteFactory1 → *1, ConcreteFactory2 → *2).

КОНТРАКТ ИСПОЛЬЗОВАНИЯ:
В пределах одного клиентского пути все продукты берутся из ОДНОГО
экземпляра фабрики. Смешивание семейств — логическая ошибка вызывающего
кода; типы её не предотвращают и в runtime она не проверяется.
build_family() передаёт одну фабрику через обе операции создания,
поэтому фабрику выбирают один раз (factory_for), а не на каждый вызов.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Dict


# =============================================================================
# ENUMS
# =============================================================================


class FactoryKind(str, Enum):
    """Известные семейства продуктов."""

    FAMILY_1 = "1"
    FAMILY_2 = "2"


# =============================================================================
# PRODUCTS
# =============================================================================


class AbstractProductA(ABC):
    """Продукт роли A. family — семейство, к которому относится тип."""

    family: ClassVar[FactoryKind]

    @abstractmethod
    def operation_a(self) -> str:
        pass


class AbstractProductB(ABC):
    """Продукт роли B; умеет взаимодействовать с A своего семейства."""

    family: ClassVar[FactoryKind]

    @abstractmethod
    def operation_b(self) -> str:
        pass

    def collaborate_with(self, product_a: AbstractProductA) -> str:
        return f"{self.operation_b()} collaborating with ({product_a.operation_a()})"


class ConcreteProductA1(AbstractProductA):
    family = FactoryKind.FAMILY_1

    def operation_a(self) -> str:
        return "ConcreteProductA1"


class ConcreteProductA2(AbstractProductA):
    family = FactoryKind.FAMILY_2

    def operation_a(self) -> str:
        return "ConcreteProductA2"


class ConcreteProductB1(AbstractProductB):
    family = FactoryKind.FAMILY_1

    def operation_b(self) -> str:
        return "ConcreteProductB1"


class ConcreteProductB2(AbstractProductB):
    family = FactoryKind.FAMILY_2

    def operation_b(self) -> str:
        return "ConcreteProductB2"


# =============================================================================
# FACTORIES
# =============================================================================


class AbstractFactory(ABC):
    """Одна операция создания на каждую роль продукта."""

    family: ClassVar[FactoryKind]

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        pass


class ConcreteFactory1(AbstractFactory):
    family = FactoryKind.FAMILY_1

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    family = FactoryKind.FAMILY_2

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


_FACTORIES: Dict[FactoryKind, Callable[[], AbstractFactory]] = {
    FactoryKind.FAMILY_1: ConcreteFactory1,
    FactoryKind.FAMILY_2: ConcreteFactory2,
}


def factory_for(kind: FactoryKind) -> AbstractFactory:
    """
    Фабрика семейства.

    Raises:
        ValueError: если семейство неизвестно
    """
    return _FACTORIES[FactoryKind(kind)]()


# =============================================================================
# FAMILY
# =============================================================================


@dataclass(frozen=True)
class ProductFamily:
    """Набор продуктов, созданных одной фабрикой."""

    family: FactoryKind
    product_a: AbstractProductA
    product_b: AbstractProductB


def build_family(factory: AbstractFactory) -> ProductFamily:
    """Все роли семейства из одного экземпляра фабрики."""
    return ProductFamily(
        family=factory.family,
        product_a=factory.create_product_a(),
        product_b=factory.create_product_b(),
    )


def is_same_family(product_a: AbstractProductA, product_b: AbstractProductB) -> bool:
    """True если оба продукта относятся к одному семейству."""
    return product_a.family == product_b.family

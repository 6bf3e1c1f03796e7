"""Creational — порождающие паттерны.

Независимые модули, не зависящие друг от друга:
- singleton: ленивый потокобезопасный единственный экземпляр
- prototype: клонирование с явной политикой SHALLOW/DEEP
- builder: пошаговая сборка продукта под управлением Director
- factory_method: выбор продукта подтипом creator
- abstract_factory: семейства совместимых продуктов

Имена продуктов в модулях пересекаются (Product, ConcreteProductA),
поэтому пакет реэкспортирует только уникальные имена.
"""

from .abstract_factory import (
    AbstractFactory,
    ConcreteFactory1,
    ConcreteFactory2,
    FactoryKind,
    ProductFamily,
    build_family,
    factory_for,
)
from .builder import BuildState, Builder, BuilderNotSetError, ConcreteBuilder, Director
from .factory_method import ConcreteCreatorA, ConcreteCreatorB, Creator, CreatorKind, creator_for
from .prototype import (
    ClonePolicy,
    DeepPrototype,
    Prototype,
    PrototypeNotFoundError,
    PrototypeRegistry,
    ShallowPrototype,
)
from .singleton import (
    LazySingleton,
    Singleton,
    SingletonInitializationError,
    SingletonRegistry,
    get_singleton,
    get_singleton_registry,
)

__all__ = [
    # Singleton
    "LazySingleton",
    "Singleton",
    "SingletonRegistry",
    "SingletonInitializationError",
    "get_singleton",
    "get_singleton_registry",
    # Prototype
    "ClonePolicy",
    "Prototype",
    "ShallowPrototype",
    "DeepPrototype",
    "PrototypeRegistry",
    "PrototypeNotFoundError",
    # Builder
    "BuildState",
    "Builder",
    "ConcreteBuilder",
    "Director",
    "BuilderNotSetError",
    # Factory Method
    "Creator",
    "ConcreteCreatorA",
    "ConcreteCreatorB",
    "CreatorKind",
    "creator_for",
    # Abstract Factory
    "AbstractFactory",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "FactoryKind",
    "ProductFamily",
    "build_family",
    "factory_for",
]

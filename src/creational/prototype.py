"""
Prototype — создание объектов копированием существующего экземпляра

Политика копирования задаётся явно для каждого типа:
- SHALLOW: копируются только поля верхнего уровня, вложенные объекты
  разделяются (aliasing) с источником
- DEEP: вложенные объекты копируются рекурсивно, клон не разделяет
  изменяемого состояния с источником

Автоматическое member-wise копирование (copy.copy/deepcopy) намеренно
не используется: каждый тип пишет свою функцию clone().
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Dict, List, Optional

from src.core.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class ClonePolicy(str, Enum):
    """Политика клонирования типа."""

    SHALLOW = "shallow"
    DEEP = "deep"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrototypeNotFoundError(KeyError):
    """Прототип с указанным ключом не зарегистрирован."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Prototype not registered: {self.key!r}"


# =============================================================================
# PROTOTYPE CONTRACT
# =============================================================================


class Prototype(ABC):
    """
    Контракт клонируемого значения.

    Подкласс обязан объявить clone_policy и реализовать clone()
    в соответствии с ней.
    """

    clone_policy: ClassVar[ClonePolicy]

    @abstractmethod
    def clone(self) -> "Prototype":
        """Новый экземпляр того же типа (политика — clone_policy)."""


# =============================================================================
# SUB-VALUE
# =============================================================================


class Component:
    """Изменяемое вложенное значение прототипа."""

    def __init__(self, name: str, tags: Optional[List[str]] = None):
        self.name = name
        self.tags: List[str] = list(tags) if tags else []

    def copy(self) -> "Component":
        """Независимая копия (список tags не разделяется)."""
        return Component(self.name, list(self.tags))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return self.name == other.name and self.tags == other.tags

    def __repr__(self) -> str:
        return f"Component(name={self.name!r}, tags={self.tags!r})"


# =============================================================================
# CONCRETE PROTOTYPES
# =============================================================================


class ShallowPrototype(Prototype):
    """
    Прототип с поверхностным клонированием.

    Клон получает собственные примитивные поля, но ссылается на те же
    component и items, что и источник.
    """

    clone_policy = ClonePolicy.SHALLOW

    def __init__(self, label: str, component: Component, items: Optional[List[str]] = None):
        self.label = label
        self.component = component
        self.items: List[str] = items if items is not None else []

    def clone(self) -> "ShallowPrototype":
        return ShallowPrototype(self.label, self.component, self.items)


class DeepPrototype(Prototype):
    """
    Прототип с глубоким клонированием.

    component и items копируются, граф значений клона полностью
    независим от источника.
    """

    clone_policy = ClonePolicy.DEEP

    def __init__(self, label: str, component: Component, items: Optional[List[str]] = None):
        self.label = label
        self.component = component
        self.items: List[str] = items if items is not None else []

    def clone(self) -> "DeepPrototype":
        return DeepPrototype(self.label, self.component.copy(), list(self.items))


# =============================================================================
# PROTOTYPE REGISTRY
# =============================================================================


class PrototypeRegistry:
    """
    Каталог именованных прототипов.

    create(key) возвращает клон зарегистрированного прототипа; сам
    прототип в реестре никогда не выдаётся наружу.
    """

    def __init__(self):
        self._prototypes: Dict[str, Prototype] = {}

    def register(self, key: str, prototype: Prototype) -> None:
        """Регистрация (или замена) прототипа под ключом key."""
        if not key:
            raise ValueError("Prototype key must be non-empty")
        self._prototypes[key] = prototype
        logger.debug(
            "Prototype registered",
            key=key,
            prototype=type(prototype).__name__,
            clone_policy=prototype.clone_policy.value,
        )

    def unregister(self, key: str) -> None:
        if key not in self._prototypes:
            raise PrototypeNotFoundError(key)
        del self._prototypes[key]

    def create(self, key: str) -> Prototype:
        """
        Новый экземпляр по ключу.

        Raises:
            PrototypeNotFoundError: если ключ не зарегистрирован
        """
        try:
            prototype = self._prototypes[key]
        except KeyError:
            raise PrototypeNotFoundError(key) from None
        return prototype.clone()

    def keys(self) -> List[str]:
        return sorted(self._prototypes)

    def __contains__(self, key: object) -> bool:
        return key in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)

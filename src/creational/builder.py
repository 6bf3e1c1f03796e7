"""
Builder — пошаговая сборка составного продукта

Компоненты:
- Product: изменяемый составной продукт с частями part_a/part_b/part_c
- Builder: контракт шагов сборки и получения результата
- ConcreteBuilder: эталонный builder ("Part A", "Part B", "Part C")
- Director: задаёт фиксированный порядок шагов (A → B → C)

Состояния builder:
    NOT_STARTED → PARTS_BUILDING → COMPLETE

Правила:
1. Части продукта заполняются только шагами builder, Director их не трогает
2. Повторный шаг перезаписывает соответствующую часть
3. get_result() до шагов возвращает пустой продукт (не ошибка)
4. Повторный construct() выполняет все шаги заново на том же builder
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from src.core.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class BuildState(str, Enum):
    """Состояние процесса сборки."""

    NOT_STARTED = "NOT_STARTED"
    PARTS_BUILDING = "PARTS_BUILDING"
    COMPLETE = "COMPLETE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BuilderNotSetError(RuntimeError):
    """Director вызван без назначенного builder."""


# =============================================================================
# PRODUCT
# =============================================================================


@dataclass
class Product:
    """Составной продукт. Незаполненная часть равна None."""

    part_a: Optional[str] = None
    part_b: Optional[str] = None
    part_c: Optional[str] = None

    def list_parts(self) -> List[str]:
        """Заполненные части в порядке A, B, C."""
        return [part for part in (self.part_a, self.part_b, self.part_c) if part is not None]

    def is_empty(self) -> bool:
        return not self.list_parts()


# =============================================================================
# BUILDER CONTRACT
# =============================================================================


class Builder(ABC):
    """Контракт builder: шаги сборки, результат, сброс."""

    @property
    @abstractmethod
    def state(self) -> BuildState:
        """Текущее состояние сборки."""

    @abstractmethod
    def build_part_a(self) -> None:
        pass

    @abstractmethod
    def build_part_b(self) -> None:
        pass

    @abstractmethod
    def build_part_c(self) -> None:
        pass

    @abstractmethod
    def get_result(self) -> Product:
        """Текущий продукт (возможно частично заполненный)."""

    @abstractmethod
    def reset(self) -> None:
        """Начать новый продукт."""


class ConcreteBuilder(Builder):
    """
    Эталонный builder.

    get_result() отдаёт текущий продукт, переводит сборку в COMPLETE и
    начинает новый пустой продукт: следующий шаг строит уже его.
    """

    PART_A = "Part A"
    PART_B = "Part B"
    PART_C = "Part C"

    def __init__(self):
        self._product = Product()
        self._state = BuildState.NOT_STARTED

    @property
    def state(self) -> BuildState:
        return self._state

    def reset(self) -> None:
        self._product = Product()
        self._state = BuildState.NOT_STARTED

    def build_part_a(self) -> None:
        self._step_started()
        self._product.part_a = self.PART_A

    def build_part_b(self) -> None:
        self._step_started()
        self._product.part_b = self.PART_B

    def build_part_c(self) -> None:
        self._step_started()
        self._product.part_c = self.PART_C

    def get_result(self) -> Product:
        product = self._product
        if product.is_empty():
            logger.debug("Builder result requested before any build step")
        self._product = Product()
        self._state = BuildState.COMPLETE
        return product

    def _step_started(self) -> None:
        self._state = BuildState.PARTS_BUILDING


# =============================================================================
# DIRECTOR
# =============================================================================


class Director:
    """
    Оркестратор сборки.

    Хранит только ссылку на builder и порядок шагов; сам продукт
    получают у builder через get_result().
    """

    def __init__(self, builder: Optional[Builder] = None):
        self._builder = builder

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def construct(self) -> None:
        """Полная сборка: A → B → C."""
        builder = self._require_builder()
        builder.build_part_a()
        builder.build_part_b()
        builder.build_part_c()

    def construct_minimal(self) -> None:
        """Минимальная сборка: только A."""
        self._require_builder().build_part_a()

    def _require_builder(self) -> Builder:
        if self._builder is None:
            raise BuilderNotSetError("Director has no builder assigned")
        return self._builder

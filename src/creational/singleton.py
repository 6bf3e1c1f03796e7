"""
Singleton — ленивый process-wide экземпляр с гарантией единственности

Компоненты:
- LazySingleton: ленивая ячейка "construct at most once"
- SingletonRegistry: реестр по одному экземпляру на класс
- Singleton: эталонный класс с get_instance()

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для N конкурентных первых вызовов get_instance() выполняется ровно одно
   конструирование, все N вызовов получают один и тот же объект
2. После публикации экземпляра get_instance() не захватывает lock
   (double-checked locking)
3. Ошибка конструирования возвращается вызвавшему потоку как
   SingletonInitializationError; ячейка остаётся пустой и следующий
   вызов повторяет конструирование
"""

import threading
from typing import Any, Callable, Dict, Generic, Optional, Type, TypeVar

from src.core.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SingletonInitializationError(Exception):
    """
    Ошибка первого конструирования singleton.

    Исходное исключение доступно через __cause__. Ячейка не "отравляется":
    следующий get_instance() выполнит конструирование заново.
    """

    def __init__(self, target: str, message: str):
        super().__init__(f"Failed to initialize singleton {target}: {message}")
        self.target = target


# =============================================================================
# LAZY CELL
# =============================================================================


class LazySingleton(Generic[T]):
    """
    Ленивая ячейка, хранящая ноль или один экземпляр.

    Экземпляр создаётся factory() при первом get_instance() и живёт до
    конца процесса (reset() существует только для тестов).
    """

    def __init__(self, factory: Callable[[], T], name: Optional[str] = None):
        self._factory = factory
        self._name = name or getattr(factory, "__qualname__", repr(factory))
        self._lock = threading.Lock()
        self._instance: Optional[T] = None
        # Флаг публикуется ПОСЛЕ присваивания _instance
        self._initialized = False
        self._construction_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def construction_count(self) -> int:
        """Число успешных конструирований (не больше 1 между reset())."""
        return self._construction_count

    def is_initialized(self) -> bool:
        return self._initialized

    def get_instance(self) -> T:
        """
        Получение единственного экземпляра.

        Returns:
            Экземпляр, созданный factory() при первом вызове

        Raises:
            SingletonInitializationError: если factory() выбросил исключение
        """
        # Fast path без lock
        if self._initialized:
            return self._instance

        with self._lock:
            if not self._initialized:
                try:
                    instance = self._factory()
                except Exception as e:
                    logger.warning(
                        "Singleton construction failed",
                        singleton=self._name,
                        error=str(e),
                    )
                    raise SingletonInitializationError(self._name, str(e)) from e

                self._instance = instance
                self._construction_count += 1
                self._initialized = True
                logger.debug("Singleton constructed", singleton=self._name)

        return self._instance

    def reset(self) -> None:
        """Очистка ячейки. Только для тестов."""
        with self._lock:
            self._instance = None
            self._initialized = False
            self._construction_count = 0


# =============================================================================
# REGISTRY
# =============================================================================


class SingletonRegistry:
    """
    Реестр singleton-экземпляров: один экземпляр на класс.

    Конструирование сериализуется lock реестра. При ошибке конструктора
    класс в реестре не регистрируется, повторный get() пробует снова.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._instances: Dict[Type[Any], Any] = {}

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Экземпляр singleton_class, создаётся при первом запросе.

        Аргументы конструктора используются только при первом создании.

        Raises:
            SingletonInitializationError: если конструктор выбросил исключение
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._lock:
            if singleton_class not in self._instances:
                try:
                    self._instances[singleton_class] = singleton_class(*args, **kwargs)
                except Exception as e:
                    logger.warning(
                        "Registry singleton construction failed",
                        singleton=singleton_class.__name__,
                        error=str(e),
                    )
                    raise SingletonInitializationError(singleton_class.__name__, str(e)) from e
                logger.debug("Registry singleton constructed", singleton=singleton_class.__name__)
            return self._instances[singleton_class]

    def contains(self, singleton_class: Type[Any]) -> bool:
        with self._lock:
            return singleton_class in self._instances

    def clear(self) -> None:
        """Удаление всех экземпляров. Только для тестов."""
        with self._lock:
            self._instances.clear()


_REGISTRY: LazySingleton[SingletonRegistry] = LazySingleton(
    SingletonRegistry, name="SingletonRegistry"
)


def get_singleton_registry() -> SingletonRegistry:
    """Глобальный реестр singleton-экземпляров."""
    return _REGISTRY.get_instance()


def get_singleton(singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """Экземпляр singleton_class из глобального реестра."""
    return get_singleton_registry().get(singleton_class, *args, **kwargs)


# =============================================================================
# REFERENCE SINGLETON
# =============================================================================


class Singleton:
    """
    Эталонный singleton.

    Единственный экземпляр доступен через Singleton.get_instance().
    Прямой вызов конструктора создаёт независимый объект и в
    демонстрации не используется.
    """

    _slot: "LazySingleton[Singleton]"

    def __init__(self):
        self.created_in_thread = threading.current_thread().name

    @classmethod
    def get_instance(cls) -> "Singleton":
        return cls._slot.get_instance()


Singleton._slot = LazySingleton(Singleton, name="Singleton")

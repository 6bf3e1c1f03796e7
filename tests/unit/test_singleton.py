"""Тесты для Singleton — ленивый потокобезопасный экземпляр.

Coverage:
- Единственность экземпляра при конкурентных первых вызовах
- Повторные вызовы возвращают тот же объект
- Ошибка конструирования: типизированное исключение и повторная попытка
- SingletonRegistry: один экземпляр на класс
- Эталонный Singleton.get_instance()
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.creational.singleton import (
    LazySingleton,
    Singleton,
    SingletonInitializationError,
    SingletonRegistry,
    get_singleton,
    get_singleton_registry,
)


class Counter:
    """Фабрика, считающая число конструирований."""

    def __init__(self, delay_sec: float = 0.0):
        self.delay_sec = delay_sec
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self) -> object:
        with self._lock:
            self.calls += 1
        # Расширяем окно гонки
        time.sleep(self.delay_sec)
        return object()


# =============================================================================
# ТЕСТЫ: LazySingleton
# =============================================================================


class TestLazySingleton:
    """Тесты ленивой ячейки."""

    def test_not_initialized_before_first_call(self):
        factory = Counter()
        cell = LazySingleton(factory, name="counter")

        assert not cell.is_initialized()
        assert cell.construction_count == 0
        assert factory.calls == 0

    def test_first_call_constructs(self):
        factory = Counter()
        cell = LazySingleton(factory)

        instance = cell.get_instance()

        assert instance is not None
        assert cell.is_initialized()
        assert cell.construction_count == 1
        assert factory.calls == 1

    def test_subsequent_calls_return_same_instance(self):
        factory = Counter()
        cell = LazySingleton(factory)

        first = cell.get_instance()
        for _ in range(10):
            assert cell.get_instance() is first

        assert factory.calls == 1

    @pytest.mark.parametrize("n_threads", [2, 8, 32])
    def test_concurrent_first_calls_construct_once(self, n_threads):
        """N конкурентных первых вызовов → одно конструирование, один объект."""
        factory = Counter(delay_sec=0.01)
        cell = LazySingleton(factory)
        barrier = threading.Barrier(n_threads)

        def worker():
            barrier.wait()
            return cell.get_instance()

        with ThreadPoolExecutor(max_workers=n_threads) as pool:
            futures = [pool.submit(worker) for _ in range(n_threads)]
            results = [f.result(timeout=10) for f in futures]

        assert factory.calls == 1
        assert cell.construction_count == 1
        assert all(r is results[0] for r in results)

    def test_name_defaults_to_factory_qualname(self):
        def make_value():
            return 42

        cell = LazySingleton(make_value)
        assert cell.name.endswith("make_value")

    def test_reset_allows_new_construction(self):
        factory = Counter()
        cell = LazySingleton(factory)

        first = cell.get_instance()
        cell.reset()
        second = cell.get_instance()

        assert first is not second
        assert factory.calls == 2
        assert cell.construction_count == 1


class TestLazySingletonFailure:
    """Ошибка конструирования не отравляет ячейку."""

    def test_failure_surfaces_typed_error(self):
        def broken():
            raise OSError("resource unavailable")

        cell = LazySingleton(broken, name="broken")

        with pytest.raises(SingletonInitializationError, match="broken") as exc_info:
            cell.get_instance()

        assert exc_info.value.target == "broken"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert not cell.is_initialized()

    def test_failure_is_retryable(self):
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first attempt fails")
            return "ready"

        cell = LazySingleton(flaky)

        with pytest.raises(SingletonInitializationError):
            cell.get_instance()

        assert cell.get_instance() == "ready"
        assert cell.get_instance() == "ready"
        assert len(attempts) == 2
        assert cell.construction_count == 1

    def test_concurrent_failure_does_not_publish(self):
        def broken():
            raise ValueError("bad config")

        cell = LazySingleton(broken)
        barrier = threading.Barrier(4)

        def worker():
            barrier.wait()
            try:
                cell.get_instance()
            except SingletonInitializationError:
                return "failed"
            return "ok"

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: worker(), range(4)))

        assert results == ["failed"] * 4
        assert not cell.is_initialized()


# =============================================================================
# ТЕСТЫ: SingletonRegistry
# =============================================================================


class Service:
    def __init__(self, name: str = "default"):
        self.name = name


class BrokenService:
    def __init__(self):
        raise RuntimeError("cannot start")


class TestSingletonRegistry:
    """Тесты реестра singleton-экземпляров."""

    def test_one_instance_per_class(self):
        registry = SingletonRegistry()

        first = registry.get(Service)
        second = registry.get(Service)

        assert first is second
        assert registry.contains(Service)

    def test_constructor_args_used_only_once(self):
        registry = SingletonRegistry()

        first = registry.get(Service, name="primary")
        second = registry.get(Service, name="ignored")

        assert second is first
        assert second.name == "primary"

    def test_failed_construction_not_registered(self):
        registry = SingletonRegistry()

        with pytest.raises(SingletonInitializationError, match="BrokenService"):
            registry.get(BrokenService)

        assert not registry.contains(BrokenService)

    def test_concurrent_get_constructs_once(self):
        registry = SingletonRegistry()
        constructed = []

        class Slow:
            def __init__(self):
                constructed.append(1)
                time.sleep(0.01)

        barrier = threading.Barrier(16)

        def worker():
            barrier.wait()
            return registry.get(Slow)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = [f.result(timeout=10) for f in [pool.submit(worker) for _ in range(16)]]

        assert len(constructed) == 1
        assert all(r is results[0] for r in results)

    def test_clear(self):
        registry = SingletonRegistry()
        first = registry.get(Service)

        registry.clear()

        assert not registry.contains(Service)
        assert registry.get(Service) is not first

    def test_global_registry_is_singleton(self):
        assert get_singleton_registry() is get_singleton_registry()

    def test_get_singleton_uses_global_registry(self):
        class GlobalService:
            pass

        instance = get_singleton(GlobalService)

        assert get_singleton(GlobalService) is instance
        assert get_singleton_registry().contains(GlobalService)


# =============================================================================
# ТЕСТЫ: Singleton
# =============================================================================


class TestReferenceSingleton:
    """Тесты эталонного Singleton."""

    def test_get_instance_returns_same_object(self):
        assert Singleton.get_instance() is Singleton.get_instance()

    def test_concurrent_get_instance(self):
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            return Singleton.get_instance()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = [f.result(timeout=10) for f in [pool.submit(worker) for _ in range(8)]]

        assert all(r is results[0] for r in results)
        assert isinstance(results[0], Singleton)

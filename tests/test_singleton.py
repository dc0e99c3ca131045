import threading

from recordfactory.internal.factory import RecordFactory, get_factory
from recordfactory.internal.singleton import Singleton


class Counter(Singleton):
    init_calls = 0

    def __init__(self, start: int = 0) -> None:
        Counter.init_calls += 1
        self.value = start


class Other(Singleton):
    pass


def test_same_instance_on_every_access() -> None:
    assert get_factory() is get_factory()
    assert RecordFactory() is get_factory()


def test_same_instance_across_threads() -> None:
    threads_count = 50
    barrier = threading.Barrier(threads_count)
    seen: list[RecordFactory] = []
    seen_lock = threading.Lock()

    def access() -> None:
        barrier.wait()
        instance = get_factory()
        with seen_lock:
            seen.append(instance)

    threads = [threading.Thread(target=access) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == threads_count
    assert all(instance is seen[0] for instance in seen)


def test_init_runs_only_once() -> None:
    Counter._instance = None
    Counter.init_calls = 0

    first = Counter(start=5)
    second = Counter(start=100)

    assert first is second
    assert Counter.init_calls == 1
    assert second.value == 5


def test_subclasses_do_not_share_instance() -> None:
    assert Other() is not get_factory()
    assert Other() is Other()


def test_first_capacity_wins() -> None:
    first = RecordFactory(capacity=3)
    second = RecordFactory(capacity=10)

    assert first is second
    assert second.capacity == 3


class Base(Singleton):
    def __init__(self) -> None:
        self.base_ready = True


class Derived(Base):
    init_calls = 0

    def __init__(self) -> None:
        super().__init__()
        Derived.init_calls += 1
        self.derived_ready = True


def test_parent_init_does_not_mark_child_initialized() -> None:
    Derived._instance = None
    Derived.init_calls = 0

    first = Derived()
    second = Derived()

    assert first is second
    assert Derived.init_calls == 1
    assert second.base_ready and second.derived_ready


def test_repeated_access_skips_lock_after_init(monkeypatch) -> None:
    factory = get_factory()

    class ExplodingLock:
        def __enter__(self):
            raise AssertionError("lock taken after initialization")

        def __exit__(self, exc_type, exc_val, exc_tb):
            return False

    monkeypatch.setattr(RecordFactory, "_lock", ExplodingLock())

    assert get_factory() is factory

import logging
import threading

from recordfactory.internal.record import Record
from recordfactory.internal.singleton import Singleton
from recordfactory.internal.subscriber import Subscriber
from recordfactory.internal.subscription import Subscription

logger = logging.getLogger(__name__)


class RegistryFullError(RuntimeError):
    pass


class RecordFactory(Singleton):
    """
    Единственная на процесс фабрика записей.

    Каждая запись из create() попадает в реестр (только добавление, порядок = порядок вызовов)
    и отдается текущим подписчикам. capacity задается только при первом создании фабрики,
    None означает реестр без ограничения.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._records: list[Record] = []
        self._subscribers: list[Subscriber] = []
        self._registry_lock = threading.Lock()  # защищает и реестр, и список подписчиков

    @property
    def capacity(self) -> int | None:
        return self._capacity

    @property
    def records(self) -> tuple[Record, ...]:
        with self._registry_lock:
            return tuple(self._records)

    def create(self, capability: int) -> Record:
        with self._registry_lock:
            if self._capacity is not None and len(self._records) >= self._capacity:
                logger.warning("Registry is full (capacity=%s), record %s rejected", self._capacity, capability)
                raise RegistryFullError(f"Registry capacity {self._capacity} reached")
            record = Record(capability)
            self._records.append(record)
            subscribers = list(self._subscribers)

        logger.debug("Created record %r", record)

        # Подписчиков вызываем вне лока, чтобы медленный подписчик не тормозил другие потоки
        for subscriber in subscribers:
            try:
                subscriber.handle_record(record)
            except Exception:
                logger.exception("Subscriber %s failed to handle %r", subscriber.name, record)

        return record

    def size(self) -> int:
        with self._registry_lock:
            return len(self._records)

    def subscribe(self, subscriber: Subscriber) -> Subscription:
        with self._registry_lock:
            if subscriber in self._subscribers:
                raise RuntimeError(f"Subscriber {subscriber.name} is already subscribed")
            self._subscribers.append(subscriber)
        logger.info("Subscribed %s", subscriber.name)
        return Subscription(self, subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        with self._registry_lock:
            if subscriber not in self._subscribers:
                return
            self._subscribers.remove(subscriber)
        logger.info("Unsubscribed %s", subscriber.name)


def get_factory() -> RecordFactory:
    return RecordFactory()


def create(capability: int) -> Record:
    return get_factory().create(capability)


def size() -> int:
    return get_factory().size()

import queue
from abc import ABC, abstractmethod

from recordfactory.internal.record import Record


class Subscriber(ABC):
    """
    Получатель записей фабрики.

    RecordFactory.create() сама вызывает handle_record для каждого подписчика, синхронно,
    в потоке, который создал запись. Базовая реализация кладет запись в очередь,
    get_record() отдает их по одной в порядке создания. Наследник обязан задать name,
    по нему подписчик виден в логах фабрики.
    """
    def __init__(self):
        self._records: queue.Queue = queue.Queue()

    @property
    @abstractmethod
    def name(self) -> str:...

    def handle_record(self, record: Record) -> None:
        self._records.put(record)

    def get_record(self, timeout: float = 10) -> Record:
        try:
            return self._records.get(timeout=timeout)

        except queue.Empty:
            raise TimeoutError(f"No records for subscriber: {self.name}, with timeout: {timeout}") from None

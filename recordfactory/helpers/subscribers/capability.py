import time

from recordfactory.internal.record import Record
from recordfactory.internal.subscriber import Subscriber


class CapabilitySubscriber(Subscriber):
    name: str = "capability"

    def find_record(self, capability: int, timeout: float = 10) -> Record:
        """
        Вычитывает записи из очереди, пока не попадется запись с нужным capability.

        create() доставляет записи синхронно, поэтому записи, созданные в этом же потоке,
        уже лежат в очереди. Ожидание до timeout нужно только когда записи создает другой поток.
        Пропущенные записи из очереди удаляются.
        """
        start_time = time.time()

        while time.time() - start_time < timeout:
            remaining = max(timeout - (time.time() - start_time), 0.01)
            try:
                record = self.get_record(timeout=remaining)
            except TimeoutError:
                break
            if record.capability == capability:
                return record

        raise TimeoutError(f"Record with capability {capability} not found by {self.name}")

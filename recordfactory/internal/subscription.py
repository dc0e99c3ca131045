from typing import TYPE_CHECKING

from recordfactory.internal.subscriber import Subscriber

if TYPE_CHECKING:
    from recordfactory.internal.factory import RecordFactory


class Subscription:
    """
    Результат factory.subscribe(...). В блоке with подписчик получает записи,
    на выходе из блока отписывается автоматически.
    """

    def __init__(self, factory: "RecordFactory", subscriber: Subscriber) -> None:
        self._factory = factory
        self._subscriber = subscriber

    @property
    def subscriber(self) -> Subscriber:
        return self._subscriber

    def cancel(self) -> None:
        self._factory.unsubscribe(self._subscriber)

    def __enter__(self):
        return self._subscriber

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cancel()

from typing import Callable

from recordfactory.internal.record import Record
from recordfactory.internal.subscriber import Subscriber


class CallbackSubscriber(Subscriber):
    # Именованный адаптер вместо анонимного объекта: оборачиваем обычную функцию
    # в интерфейс Subscriber прямо в месте вызова.
    # buffered=False: только колбэк, очередь не копится, если get_record никто не читает

    def __init__(self, callback: Callable[[Record], object], name: str = "callback", buffered: bool = True):
        super().__init__()
        self._callback = callback
        self._name = name
        self._buffered = buffered

    @property
    def name(self) -> str:
        return self._name

    def handle_record(self, record: Record) -> None:
        # Сначала буферизуем: если колбэк упадет, запись все равно доступна через get_record
        if self._buffered:
            super().handle_record(record)
        self._callback(record)

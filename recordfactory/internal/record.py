from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """
    Неизменяемая запись, которую выпускает фабрика.
    Две записи с одинаковым capability равны по значению, но это разные объекты.
    """
    capability: int

    @staticmethod
    def make(capability: int) -> "Record":
        # Аналог статического метода на типе: делегируем общему синглтону фабрики
        from recordfactory.internal.factory import get_factory

        return get_factory().create(capability)

import pytest

from recordfactory.helpers.subscribers.capability import CapabilitySubscriber
from recordfactory.internal.factory import RecordFactory, get_factory


# Сбрасываем синглтон, чтобы каждый тест начинал с пустого реестра
@pytest.fixture(autouse=True)
def _reset_factory():
    RecordFactory._instance = None
    yield
    RecordFactory._instance = None


@pytest.fixture
def factory() -> RecordFactory:
    return get_factory()


@pytest.fixture
def capability_subscriber(factory: RecordFactory) -> CapabilitySubscriber:
    subscriber = CapabilitySubscriber()
    with factory.subscribe(subscriber):
        yield subscriber

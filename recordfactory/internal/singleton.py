import functools
import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class Singleton:
    # Паттерн Singleton: на весь процесс создается только один объект класса.
    # У каждого наследника свой _instance и свой _lock, поэтому
    # RecordFactory и любой другой синглтон не делят один объект.
    # Блокировка нужна для потокобезопасности: при одновременном вызове из
    # нескольких потоков второй объект не будет создан.
    _instance: Any | None = None
    _lock = threading.RLock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._instance = None
        cls._lock = threading.RLock()

        init = cls.__dict__.get("__init__")
        if init is None:
            return

        # Флаг свой у каждого класса: super().__init__() родителя не должен открыть быстрый путь наследнику
        initialized = f"_{cls.__name__}_initialized"

        # __init__ выполняется только при первом создании, повторные Cls(...) его пропускают
        @functools.wraps(init)
        def __init__(self, *args, **kw):
            # Быстрый путь без лока: объект уже инициализирован
            if self.__dict__.get(initialized):
                return
            with cls._lock:
                if self.__dict__.get(initialized):
                    return
                init(self, *args, **kw)
                setattr(self, initialized, True)

        cls.__init__ = __init__

    def __new__(cls, *args, **kwargs):
        # Double-checked locking: когда объект уже создан, ни __new__, ни обертка __init__ лок не берут
        instance = cls.__dict__.get("_instance")
        if instance is not None:
            return instance

        with cls._lock:
            instance = cls.__dict__.get("_instance")
            if instance is None:
                instance = super().__new__(cls)
                cls._instance = instance
                logger.info("Created singleton %s", cls.__name__)
            return instance

import threading
from typing import Any, TypeVar, cast

from loggers import get_logger
from src.core.errors.exceptions import DirectInstantiationException

logger = get_logger(__name__)

T = TypeVar("T", bound="Singleton")

_instances: dict[type["Singleton"], "Singleton"] = {}
_lock = threading.RLock()


class Singleton:
    """
    Base class for process-wide, lazily created instances.

    Clients never call the constructor. They call ``get_instance()``, which
    creates the instance on first use and returns the cached one afterwards.
    Every subclass gets its own instance.

    Initialisation is guarded by double-checked locking, so concurrent first
    calls from several threads still run ``__init__`` exactly once per class.
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> "Singleton":
        raise DirectInstantiationException(
            f"{cls.__name__} can not be constructed directly, "
            f"use {cls.__name__}.get_instance()",
            additional_info={"class": cls.__qualname__},
        )

    @classmethod
    def get_instance(cls: type[T]) -> T:
        """Return the instance of this class, creating it on the first call."""
        instance = _instances.get(cls)
        if instance is None:
            with _lock:
                instance = _instances.get(cls)
                if instance is None:
                    # Bypass __new__, the only way in is through here.
                    instance = object.__new__(cls)
                    instance.__init__()  # type: ignore[misc]
                    _instances[cls] = instance
                    logger.debug("Created %s instance %s", cls.__name__, id(instance))
        return cast(T, instance)

    @classmethod
    def reset_instances(cls) -> None:
        """Drop every cached instance. Intended for tests."""
        with _lock:
            _instances.clear()

    def some_business_logic(self) -> str:
        return f"{type(self).__name__} instance {id(self):#x} handled the request"

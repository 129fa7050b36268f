from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Product(Protocol):
    """Protocol defining the operation every product implements."""

    def operation(self) -> str: ...


class Creator(ABC):
    """
    Base creator that defers product construction to ``factory_method``.

    Subclasses pick the concrete product type by overriding the factory
    method. The core logic in ``some_operation`` only talks to the product
    through the ``Product`` protocol and never names a concrete class.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        """Create the product this creator works with."""
        pass

    def some_operation(self) -> str:
        product = self.factory_method()
        return (
            f"Creator: The same creator's code has just worked with {product.operation()}"
        )

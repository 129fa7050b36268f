from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeVar

from src.core.errors.exceptions import InvalidArgumentException

P = TypeVar("P", bound="Prototype")


@dataclass(eq=False)
class Component:
    """A plain nested object owned by a prototype."""

    created_at: datetime
    tags: list[str] = field(default_factory=list)

    def clone(self) -> "Component":
        # One level deep: ``tags`` stays shared with the original.
        return Component(created_at=self.created_at, tags=self.tags)


@dataclass(eq=False)
class ComponentWithBackReference:
    """A nested object that points back at the prototype owning it."""

    prototype: "Prototype"
    label: str = ""

    def clone_for(self, owner: "Prototype") -> "ComponentWithBackReference":
        return ComponentWithBackReference(prototype=owner, label=self.label)


class Prototype:
    """
    An object that can produce a copy of itself.

    ``clone`` copies every field explicitly. The primitive value is carried
    over as is, the component is copied one level deep, and the component
    with a back reference is rebuilt so that it points at the clone instead
    of the original.
    """

    def __init__(
        self,
        primitive: Any = None,
        component: Component | None = None,
        circular_reference: ComponentWithBackReference | None = None,
    ) -> None:
        self.primitive = primitive
        self.component = component
        self.circular_reference = circular_reference

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(primitive={self.primitive!r}, "
            f"component={self.component!r})"
        )

    def validate(self) -> tuple[Component, ComponentWithBackReference]:
        if not isinstance(self.component, Component):
            raise InvalidArgumentException(
                "Prototype can not be cloned without a component",
                additional_info={"component": self.component},
            )
        if not isinstance(self.circular_reference, ComponentWithBackReference):
            raise InvalidArgumentException(
                "Prototype can not be cloned without a component with back reference",
                additional_info={"circular_reference": self.circular_reference},
            )
        return self.component, self.circular_reference

    def clone(self: P) -> P:
        component, circular_reference = self.validate()

        clone = type(self).__new__(type(self))
        clone.primitive = self.primitive
        clone.component = component.clone()
        clone.circular_reference = circular_reference.clone_for(clone)
        return clone

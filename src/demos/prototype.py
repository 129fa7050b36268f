from datetime import datetime
from typing import cast

from src.core.patterns.prototype import (
    Component,
    ComponentWithBackReference,
    Prototype,
)


def client_code() -> None:
    p1 = Prototype()
    p1.primitive = 245
    p1.component = Component(created_at=datetime.now())
    p1.circular_reference = ComponentWithBackReference(p1)

    p2 = p1.clone()

    if p1.primitive == p2.primitive:
        print("Primitive field values have been carried over to a clone. Yay!")
    else:
        print("Primitive field values have not been copied. Booo!")

    if p1.component is p2.component:
        print("Simple component has not been cloned. Booo!")
    else:
        print("Simple component has been cloned. Yay!")

    if p1.circular_reference is p2.circular_reference:
        print("Component with back reference has not been cloned. Booo!")
    else:
        print("Component with back reference has been cloned. Yay!")

    clone_holder = cast(ComponentWithBackReference, p2.circular_reference)
    if clone_holder.prototype is p1:
        print("Component with back reference is linked to original object. Booo!")
    else:
        print("Component with back reference is linked to the clone. Yay!")


if __name__ == "__main__":
    client_code()

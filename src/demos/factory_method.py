from src.core.patterns.factory_method import Creator, Product


class ConcreteProduct1:
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2:
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> None:
    """Works with any creator through the base interface."""
    print("Client: I'm not aware of the creator's class, but it still works.")
    print(creator.some_operation())


def run() -> None:
    print("App: Launched with the ConcreteCreator1.")
    client_code(ConcreteCreator1())
    print("")

    print("App: Launched with the ConcreteCreator2.")
    client_code(ConcreteCreator2())


if __name__ == "__main__":
    run()

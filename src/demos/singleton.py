from src.core.patterns.singleton import Singleton


def client_code() -> None:
    s1 = Singleton.get_instance()
    s2 = Singleton.get_instance()

    if s1 is s2:
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")


if __name__ == "__main__":
    client_code()

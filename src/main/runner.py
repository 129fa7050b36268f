from collections.abc import Callable, Iterable

from loggers import get_logger
from src.core.errors.exceptions import CoreException, DemoNotFoundException
from src.core.errors.handlers import handle_core_exception
from src.demos import factory_method, prototype, singleton
from src.main.config import config

logger = get_logger(__name__)

DEMOS: dict[str, Callable[[], None]] = {
    "singleton": singleton.client_code,
    "factory_method": factory_method.run,
    "prototype": prototype.client_code,
}


def run_demo(name: str) -> None:
    """
    Run a single demo by its registry name.

    Raises:
        DemoNotFoundException: if no demo is registered under ``name``.
    """
    demo = DEMOS.get(name)
    if demo is None:
        raise DemoNotFoundException(
            f"Unknown demo: {name}",
            additional_info={"available": sorted(DEMOS)},
        )

    logger.info("Running demo '%s'", name)
    demo()
    logger.debug("Demo '%s' finished", name)


def run_demos(names: Iterable[str] | None = None) -> int:
    """
    Run demos in order, separated by an empty line, and return an exit code.
    """
    selected = list(config.app.DEMOS if names is None else names)
    try:
        for index, name in enumerate(selected):
            if index:
                print("")
            run_demo(name)
    except CoreException as exc:
        return handle_core_exception(exc)

    logger.info("Finished %s demo(s)", len(selected))
    return 0

import sys

from loggers import get_logger
from src.main.config import config
from src.main.runner import run_demos

logger = get_logger(__name__)


def main() -> int:
    logger.info("%s %s started", config.app.PROJECT_NAME, config.app.VERSION)
    return run_demos()


if __name__ == "__main__":
    sys.exit(main())

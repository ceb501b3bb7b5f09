import os
import sys
import logging

from project_status.action import run
from project_status.config import settings


def configure_logging():
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main():
    configure_logging()

    try:
        run(settings())
    except Exception as e:
        logging.error(f"Failed to update project status: {e}")
        # surfaces the failure reason as a workflow annotation
        print(f"::error::{e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Entrypoint for the voice memo pipeline.

``main`` loads a ``.env`` file if present, reads the configuration from the
environment and runs :func:`voicememo.tasks.process_memo`.  Any failure is
reported with a single log line; details have already been logged by the
stage that failed.  The process exits normally either way.
"""

import logging

from dotenv import load_dotenv

from . import tasks
from .config import load_config

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    load_dotenv()
    try:
        config = load_config()
        tasks.process_memo(config)
    except Exception as exc:
        logger.error("An error occurred during processing: %s", exc)


if __name__ == "__main__":
    main()

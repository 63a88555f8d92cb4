from __future__ import annotations

import logging

from rq import Worker

from api.config import get_settings
from api.queue import get_redis

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting rq worker on queue %s", settings.rq_queue)
    worker = Worker([settings.rq_queue], connection=get_redis())
    worker.work(with_scheduler=True)


if __name__ == "__main__":
    main()

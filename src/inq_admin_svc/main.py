import logging

import uvicorn

from inq_admin_svc import config

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the admin front-end; the remote API is only reached per request."""
    logging.basicConfig(level=config.LOG_LEVEL)
    logger.info(
        "Starting admin front-end on %s:%s against %s",
        config.HOST,
        config.PORT,
        config.INQUIRY_API_BASE_URL,
    )
    uvicorn.run("inq_admin_svc.app:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()

import logging

import uvicorn

from ddf_api.config import Settings
from ddf_api.main import create_app

LOG = logging.getLogger("api")


def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    base = f"http://localhost:{settings.port}/api"
    LOG.info("CREA DDF API server on port %d", settings.port)
    LOG.info("Health check: %s/health", base)
    LOG.info("Listings: %s/listings", base)
    LOG.info("Statistics: %s/statistics", base)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

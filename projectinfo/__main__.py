import sys

import uvicorn
from loguru import logger

from .config import AppConfig
from .exceptions import IdentityResolutionError
from .gcp.projects import ProjectsLookup
from .identity import resolve_identity
from .log import setup_logging
from .main import create_app


def main() -> None:
    config = AppConfig()
    setup_logging(config.debug)

    # The project ID must be known before we accept any connections
    try:
        identity = resolve_identity(config)
    except IdentityResolutionError as e:
        logger.error(f"Failed to get project ID: {e}")
        sys.exit(1)

    app = create_app(identity, ProjectsLookup())
    logger.info(f"Listening on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()

import argparse

import structlog
import uvicorn

from sharkfinn.config import settings

logger = structlog.get_logger()


def main() -> None:
    parser = argparse.ArgumentParser(description="SharkFinn Learning server")
    parser.add_argument("--dev", action="store_true", help="Run in dev mode with reload")
    args = parser.parse_args()

    logger.info(
        "SharkFinn Learning server starting",
        url=f"http://localhost:{settings.PORT}",
    )
    uvicorn.run(
        "sharkfinn.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=args.dev,
        log_level="info",
    )


if __name__ == "__main__":
    main()

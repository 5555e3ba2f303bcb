"""Run the service with uvicorn: ``python -m liveness_relay``."""

import uvicorn

from liveness_relay.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "liveness_relay.app:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

# user_registry/__main__.py

import uvicorn

from user_registry.core.config import settings


def main() -> None:
    uvicorn.run(
        "user_registry.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

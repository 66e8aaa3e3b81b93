"""Run the API with uvicorn: `python -m bookmarks`."""

import uvicorn

from bookmarks.config import settings


def main() -> None:
    uvicorn.run(
        "bookmarks.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development" and settings.debug,
    )


if __name__ == "__main__":
    main()

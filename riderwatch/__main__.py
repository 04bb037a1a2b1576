"""Run the API server with uvicorn."""

import uvicorn

from riderwatch.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "riderwatch.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()

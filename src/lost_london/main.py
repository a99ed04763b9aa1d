"""Entrypoint: run the Lost London search server."""

import uvicorn

from lost_london.api.app import create_app
from lost_london.config.settings import Settings


def main() -> None:
    settings = Settings()
    app = create_app()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

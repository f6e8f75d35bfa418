"""Process entry point - `python -m forum` or the `forum-server` script."""

import uvicorn

from forum.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "forum.main:app", host=settings.host, port=settings.port,
        reload=False, log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

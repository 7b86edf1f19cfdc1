"""Run the API with uvicorn: `python -m hardball`."""

import uvicorn

from hardball.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "hardball.main:app", host=settings.host, port=settings.port,
        workers=1,
    )


if __name__ == "__main__":
    main()

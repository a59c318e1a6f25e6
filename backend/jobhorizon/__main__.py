"""Run the API with uvicorn: python -m jobhorizon"""

import uvicorn

from jobhorizon.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "jobhorizon.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()

import uvicorn

from eventfinder.core.config import settings


def main() -> None:
    uvicorn.run("eventfinder.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()

import uvicorn

from backend.core import config


def main() -> None:
    uvicorn.run('backend.main:app', host=config.HOST, port=config.PORT, reload=False)


if __name__ == '__main__':
    main()

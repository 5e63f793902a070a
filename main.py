import logging

from rich.logging import RichHandler
import uvicorn

from app import config


CONFIG = config.Config()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main() -> None:
    configure_logging(CONFIG.log_level)
    uvicorn.run(
        "app.app:create_app",
        factory=True,
        host=CONFIG.host,
        port=CONFIG.port,
        reload=CONFIG.env == config.Env.local,
        log_config=None,
    )


if __name__ == "__main__":
    main()

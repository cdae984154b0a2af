"""Application entry point for the dispatcher server."""

from dispatcher.app import App
from dispatcher.config import Config
from dispatcher.logging import setup_logging
from dispatcher.web.runner import run_server


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from knowledge_qa.config import Settings

# Client libraries that log every request or statement at INFO/DEBUG
CHATTY_LOGGERS = ("httpx", "httpcore", "aiosqlite")


class AppLogger:
    """
    Configures the root logger once for the whole service and hands out named loggers.

    Production deployments get one JSON object per line so the output can be shipped
    to a log collector as-is; every other environment gets a human-readable format.

    Attributes:
        settings (Settings): Provides `log_level` and `app_env`.
        logger (logging.Logger): The root logger that `setup()` configures.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.logger = logging.getLogger()

    def setup(self):
        """
        Apply the configured level and install a single stdout handler.

        Existing handlers are removed first so repeated calls (tests, reloads) do not
        produce duplicate log lines. HTTP and SQLite client loggers are held at WARNING
        unless the service itself runs at DEBUG.
        """
        level = self.settings.log_level.upper()
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)

        if self.settings.app_env.lower() == "production":
            formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s %(filename)s")
        else:
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s]: %(message)s")

        handler.setFormatter(formatter)

        if self.logger.hasHandlers():
            self.logger.handlers.clear()
        self.logger.addHandler(handler)

        chatty_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(chatty_level)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Return the logger registered under `name`, usually the caller's `__name__`.

        Args:
            name (str): Dotted logger name.

        Returns:
            logging.Logger: The named logger; it propagates to the root handler.
        """
        return logging.getLogger(name)

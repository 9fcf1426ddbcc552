import logging

from pydantic_settings import SettingsConfigDict, BaseSettings

ROOT_LOGGER_NAME = "paginator"

# Библиотека не трогает корневой логгер при импорте
logger = logging.getLogger(ROOT_LOGGER_NAME)
logger.addHandler(logging.NullHandler())


class LoggerSettings(BaseSettings):
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT: str = "%(asctime)s : %(levelname)s : %(name)s : %(funcName)s: %(message)s"
    LOG_DATEFMT: str = "%d-%b-%y %H:%M:%S"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow"
    )

    def get_logging_level(self) -> int:
        """Уровень логирования; неизвестное имя уровня даёт WARNING."""
        level = getattr(logging, self.LOG_LEVEL.upper(), None)
        return level if isinstance(level, int) else logging.WARNING


def configure_logging(settings: LoggerSettings | None = None) -> logging.Logger:
    """
    Настроить вывод логов (вызывается приложением явно)

    :param settings: настройки логирования (по умолчанию из окружения)
    :return: логгер пакета
    """
    settings = settings or LoggerSettings()
    logging.basicConfig(
        level=settings.get_logging_level(),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATEFMT,
    )
    logger.setLevel(settings.get_logging_level())
    return logger


def get_logger(name: str) -> logging.Logger:
    """Дочерний логгер пакета: paginator.<name>."""
    return logger.getChild(name.removeprefix(f"{ROOT_LOGGER_NAME}."))

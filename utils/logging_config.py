from logging.config import dictConfig


def configure_logging(level: str = "INFO") -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "class": "logging.Formatter",
                    "datefmt": "%Y:%m:%dT%H:%M:%S",
                    "style": "{",
                    "format": "{name}:{lineno:d} - {message}",
                },
            },
            "handlers": {
                "default": {
                    "class": "rich.logging.RichHandler",
                    "level": "DEBUG",
                    "formatter": "console",
                },
            },
            "loggers": {
                "engines": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": False,
                },
                "utils": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": False,
                },
                "__main__": {
                    "handlers": ["default"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )

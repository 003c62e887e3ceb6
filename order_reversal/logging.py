import sys
from typing import Optional

from loguru import logger
from order_reversal.config import get_config

LIBRARY = "order_reversal"

# Handler owned by this library; any other loguru handlers belong to the host program
_handler_id: Optional[int] = None
_handler_level: Optional[str] = None


def _remove_handler(handler_id: int) -> None:
    try:
        logger.remove(handler_id)
    except ValueError:
        # Already removed by the host, e.g. through a bare logger.remove()
        pass


def _is_library_record(record) -> bool:
    return record["extra"].get("library") == LIBRARY


class AppLogger:
    """Logger configuration for the library.

    Adds a single stderr sink at get_config().log_level, shared by every
    AppLogger. The sink is replaced only when the configured level changes,
    and it only receives records logged through this library, so handlers the
    host program registered with loguru are left alone.
    """
    def __init__(self) -> None:
        global _handler_id, _handler_level
        log_level = get_config().log_level.upper()
        if _handler_id is None or _handler_level != log_level:
            if _handler_id is not None:
                _remove_handler(_handler_id)
            _handler_id = logger.add(
                sink=sys.stderr,
                level=log_level,
                filter=_is_library_record,
                format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
            )
            _handler_level = log_level
        self.logger = logger.bind(library=LIBRARY, name=LIBRARY)

    def get_logger(self, name: str = None):
        """Get the configured logger instance.

        Args:
            name (str, optional): Name for the logger context. Defaults to None.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        if name:
            return self.logger.bind(name=name)
        return self.logger


def get_logger(name: str = None):
    """Get a library logger, reconfiguring the library sink if the log level changed."""
    return AppLogger().get_logger(name)


def remove_library_handler() -> None:
    """Detach the library's sink (the host's handlers stay in place)."""
    global _handler_id, _handler_level
    if _handler_id is not None:
        _remove_handler(_handler_id)
    _handler_id = None
    _handler_level = None

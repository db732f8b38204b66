from enum import Enum
from functools import wraps
import logging

from loguru import logger
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success


class FailureLevel(Enum):
    DEBUG = logging.DEBUG
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def log_failure(failure_message: str, failure_level: FailureLevel, error: str) -> None:
    message = f"{failure_message}: {error}"
    match failure_level:
        case FailureLevel.DEBUG:
            logger.debug(message)
        case FailureLevel.WARNING:
            logger.warning(message)
        case FailureLevel.ERROR:
            logger.error(message)
        case FailureLevel.CRITICAL:
            logger.critical(message)


def _log_io_container(
    result: IOResult,
    failure_message: str,
    success_message: str | None,
    failure_level: FailureLevel,
) -> None:
    match result:
        case IOSuccess():
            if success_message:
                logger.debug(success_message)
        case IOFailure(Failure(error)):
            log_failure(failure_message, failure_level, str(error))


def _log_container(
    result: Result,
    failure_message: str,
    success_message: str | None,
    failure_level: FailureLevel,
) -> None:
    match result:
        case Success():
            if success_message:
                logger.debug(success_message)
        case Failure(error):
            log_failure(failure_message, failure_level, str(error))


def log_railway_function(
    failure_message: str,
    success_message: str | None = None,
    failure_level: FailureLevel = FailureLevel.ERROR,
):
    """
    Log the outcome of a function returning a `Result` or `IOResult` container.

    Successes are logged at DEBUG level, failures at `failure_level` together with
    the string representation of the captured exception.

    :param failure_message: Prefix of the log line emitted on failure.
    :param success_message: Optional log line emitted on success.
    :param failure_level: The level at which failures are logged.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            result = func(*args, **kwargs)
            match result:
                case IOResult():
                    _log_io_container(
                        result, failure_message, success_message, failure_level
                    )
                case Result():
                    _log_container(
                        result, failure_message, success_message, failure_level
                    )
            return result

        return wrapper

    return decorator

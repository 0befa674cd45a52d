"""Package-wide logging helpers."""

from __future__ import annotations

import logging
from typing import Optional, Union

_ROOT_LOGGER_NAME = "solc_invoke"
_DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``solc_invoke`` namespace.

    Parameters
    ----------
    name : Optional[str]
        Component name, e.g. ``"CompilerRegistry"``. When omitted the package root logger is
        returned.

    Returns
    -------
    logging.Logger
        The logger ``solc_invoke.<name>``.
    """
    if not name:
        return logging.getLogger(_ROOT_LOGGER_NAME)
    if name.startswith(_ROOT_LOGGER_NAME + ".") or name == _ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.INFO, fmt: str = _DEFAULT_FORMAT
) -> logging.Logger:
    """Attach a stream handler to the package root logger and set its level.

    Calling this more than once replaces the handler installed by the previous call instead of
    stacking another one.

    Parameters
    ----------
    level : Union[int, str]
        Logging level, either numeric or a name such as ``"DEBUG"``.
    fmt : str
        Format string for the handler.

    Returns
    -------
    logging.Logger
        The configured package root logger.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_solc_invoke_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._solc_invoke_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger

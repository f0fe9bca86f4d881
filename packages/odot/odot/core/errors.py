"""
odot: Error Taxonomy and Logging
--------------------------------
Exception types, the package warning class, and a shared logger. Object
construction itself defines no domain errors (Python's own ``TypeError`` /
``AttributeError`` propagate); this taxonomy covers the surrounding layers:
configuration loading, lazy plugin resolution and the CLI.

Behavior
--------
- The shared logger is named "odot" and can be configured to console and
  file with optional JSON formatting.
- Python warnings are captured into logging with adjustable levels.
"""

import logging
import os
import warnings
from typing import Any, Callable, Optional, TypeVar, cast

__all__ = [
    "OdotError",
    "OdotIOError",
    "OdotConfigError",
    "OdotRegistryError",
    "OdotWarning",
    "get_logger",
    "configure_logging",
    "deprecated",
]

# Exception hierarchy
class OdotError(Exception):
    pass

class OdotIOError(OdotError): # Code Numbering: 100-103
    pass

class OdotRegistryError(OdotError): # Code Numbering: 4xx
    pass

class OdotConfigError(OdotError): # Code Numbering: 4xx (lookup), 5xx (files)
    pass

# Warning hierarchy
class OdotWarning(Warning): # Code Numbering: 9xx
    pass

# Logger
_logger: Optional[logging.Logger] = None

def get_logger() -> logging.Logger:
    """Get the shared odot logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named ``"odot"`` configured at INFO level by
        default with a console handler. Handlers are created lazily on first use.

    Examples
    --------
    >>> logger = get_logger()
    >>> logger.name
    'odot'
    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger("odot")
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            h.setFormatter(fmt)
            _logger.addHandler(h)
    return _logger

def configure_logging(verbose: bool = False,
                      log_file: Optional[str] = None,
                      as_json: bool = False,
                      suppress_warnings: bool = False) -> None:
    """Configure the shared logger outputs and warning capture.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs.
    as_json : bool, default False
        Emit logs in a compact JSON line format when True; otherwise plain text.
    suppress_warnings : bool, default False
        Route Python warnings into logging and raise their level to ERROR when
        True; otherwise capture warnings at WARNING level.

    Raises
    ------
    OdotIOError
        - [101] The log file cannot be opened for appending.
    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    ch = logging.StreamHandler()
    if as_json:
        fmt = logging.Formatter('{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","msg":"%(message)s"}')
    else:
        fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            raise OdotIOError(f"[101] Cannot open log file '{log_file}': {e}") from e
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(
        logging.ERROR if suppress_warnings else logging.WARNING
    )

T = TypeVar("T")

def deprecated(reason: str) -> Callable[[T], T]:
    """Decorator to mark functions as deprecated.

    On first call, emits an ``OdotWarning`` (code [990]) via Python's warnings
    subsystem and logs the same message through the shared logger. Subsequent
    calls will not repeat the warning.

    Parameters
    ----------
    reason : str
        Human-readable explanation of the deprecation and suggested alternative.

    Examples
    --------
    >>> @deprecated("Use new_api() instead")
    ... def old_api():
    ...     return 42
    >>> isinstance(old_api(), int)
    True
    """
    def _decorator(obj: T) -> T:
        warned_attr = "__odot_deprecated_warned__"

        if callable(obj):
            def _wrapped(*args, **kwargs):  # type: ignore[misc]
                if not getattr(_wrapped, warned_attr, False):
                    msg = f"[990] DEPRECATED: {getattr(obj, '__name__', str(obj))}: {reason}"
                    warnings.warn(msg, OdotWarning, stacklevel=2)
                    get_logger().warning(msg)
                    setattr(_wrapped, warned_attr, True)
                return cast(Callable[..., Any], obj)(*args, **kwargs)
            _wrapped.__name__ = getattr(obj, "__name__", _wrapped.__name__)
            _wrapped.__doc__ = getattr(obj, "__doc__", None)
            return cast(T, _wrapped)
        return obj
    return _decorator

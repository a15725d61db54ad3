"""
Logging configuration for the Nuage REST session layer.

Session records and, in debug mode, urllib3 connection records share one
console handler.  Each line carries the logger name so the two can be told
apart.
"""

import logging

import urllib3

try:
    import colorlog
    _COLORLOG_AVAILABLE = True
except ImportError:
    _COLORLOG_AVAILABLE = False

log = logging.getLogger("nuage-session")

_TRANSPORT_LOGGER = "urllib3"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def _console_handler() -> logging.Handler:
    if _COLORLOG_AVAILABLE:
        handler = colorlog.StreamHandler()
        handler.setFormatter(colorlog.ColoredFormatter(
            "%(log_color)s" + _FORMAT.replace("%(name)s", "%(reset)s%(name)s"),
            datefmt=_DATEFMT,
            log_colors={
                "DEBUG":    "cyan",
                "INFO":     "green",
                "WARNING":  "yellow",
                "ERROR":    "red",
                "CRITICAL": "bold_red",
            },
        ))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    return handler


def setup_logging(debug: bool = False, verify_ssl: bool = True) -> logging.Handler:
    """
    Configure the package logger and return its console handler.

    * ``debug`` lowers the package logger to DEBUG (request and response
      details) and routes urllib3's connection logging to the same handler.
    * ``verify_ssl=False`` silences urllib3's per-request
      ``InsecureRequestWarning`` and logs a single warning instead.

    Calling it again replaces the handler installed by the previous call.
    """
    handler = _console_handler()

    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.handlers.clear()
    log.addHandler(handler)

    transport = logging.getLogger(_TRANSPORT_LOGGER)
    for old in [h for h in transport.handlers if getattr(h, "_nuage_session", False)]:
        transport.removeHandler(old)
    if debug:
        handler._nuage_session = True
        transport.setLevel(logging.DEBUG)
        transport.addHandler(handler)
    else:
        transport.setLevel(logging.WARNING)

    if not verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    return handler

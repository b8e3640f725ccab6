"""Log setup for the calculator's CLI and page.

Only the ``bmr_calculator`` logger is touched, so embedding hosts keep their
own root configuration.
"""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger and set its level.

    Safe to call on every CLI invocation or page rerun: the handler is added
    once, the level is updated each time.
    """
    logger = logging.getLogger("bmr_calculator")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

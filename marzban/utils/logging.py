import logging

logger = logging.getLogger("marzban")
logger.addHandler(logging.NullHandler())


def set_log_level(level: int | str) -> None:
    """Set the SDK log level and attach a stderr handler if none is configured."""
    logger.setLevel(level)
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

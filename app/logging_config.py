import logging


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configures console logging for the application package.
    """
    logger = logging.getLogger("app")
    logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")

    # Log to console
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger

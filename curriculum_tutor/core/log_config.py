import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once; an existing handler is reused.
    """
    logger = logging.getLogger("curriculum_tutor")
    logger.setLevel(level.upper())

    if not any(getattr(h, "_curriculum_tutor", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._curriculum_tutor = True
        logger.addHandler(handler)

    return logger

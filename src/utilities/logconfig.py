# utilities/logconfig.py
import logging

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(name=None, level=logging.WARNING, log_format=DEFAULT_FORMAT, log_file=None):
    """
    Route render logs to stderr, and to log_file when given. With name=None the
    root logger is configured, which covers every renderer module at once.
    Calling it again replaces the handlers from the previous call.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    # stderr keeps stdout free for PPM output
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(log_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

import os
import logging


def get_logger(name, filename=None):
    """
    Build a named logger writing to Logs/<filename or name>.log and stderr.

    Args:
        name: Logger name shown in each record
        filename: Optional log file stem (defaults to name)

    Returns:
        Configured logging.Logger (handlers are attached only once per name)
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return logger

    os.makedirs("Logs", exist_ok=True)
    fh = logging.FileHandler(f"Logs/{filename if filename else name}.log")
    fh.setLevel(logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    fh.setFormatter(formatter)
    ch.setFormatter(formatter)
    # add the handlers to the logger
    logger.addHandler(fh)
    logger.addHandler(ch)
    return logger

import logging
from pathlib import Path
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter(FORMAT)

    if not logger.handlers:
        sh = logging.StreamHandler()
        sh.setLevel(logging.INFO)
        sh.setFormatter(fmt)
        logger.addHandler(sh)

    # файловий лог можна додати пізніше, але тільки один
    if log_file is not None and not any(
            isinstance(h, logging.FileHandler) for h in logger.handlers
    ):
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger

# app/utils/app_logging.py
# Rotating file + console logger configured from AppConfig.

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from app.config.app_config import AppConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOGGER_NAME = "trackr_api"

def get_logger(cfg: AppConfig) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(getattr(logging, cfg.log_level, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT)

    if cfg.log_file:
        Path(cfg.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(cfg.log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    return logger

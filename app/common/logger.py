# app/common/logger.py

import logging
from logging.handlers import RotatingFileHandler
import os

def setup_logger(app):
    log_dir = app.config.get('LOG_DIR', 'logs')
    os.makedirs(log_dir, exist_ok=True)

    log_file = os.path.abspath(os.path.join(log_dir, 'app.log'))

    # app.logger is shared by every app built in the same process
    for handler in app.logger.handlers:
        if getattr(handler, 'baseFilename', None) == log_file:
            return

    file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.INFO)

    app.logger.addHandler(file_handler)
    app.logger.setLevel(logging.INFO)

"""
Logging system
"""
import logging
import os
import config


class Logger:
    """Process-wide application logger"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self._setup_logger()

    def _setup_logger(self):
        """Configures the underlying logger"""
        formatter = logging.Formatter(
            config.LOG_FORMAT,
            datefmt=config.LOG_DATE_FORMAT
        )

        self.logger = logging.getLogger('AddressResolver')
        self.logger.setLevel(getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))

        # File handler
        if config.LOG_TO_FILE:
            os.makedirs(config.LOGS_DIR, exist_ok=True)
            file_handler = logging.FileHandler(
                config.LOG_FILE,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

    def debug(self, message: str):
        """Debug level"""
        self.logger.debug(message)

    def info(self, message: str):
        """Info level"""
        self.logger.info(message)

    def warning(self, message: str):
        """Warning level"""
        self.logger.warning(message)

    def error(self, message: str):
        """Error level"""
        self.logger.error(message)

    def critical(self, message: str):
        """Critical level"""
        self.logger.critical(message)

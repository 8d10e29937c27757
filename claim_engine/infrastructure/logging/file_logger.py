import logging
from claim_engine.application.ports.logger import ILogger

class FileLogger(ILogger):
    """A concrete implementation of ILogger that writes to a file."""

    def __init__(self, log_file: str = "claims.log", level: int | str = logging.DEBUG):
        # Configure the logger
        self.logger = logging.getLogger("Claim_Engine_Logger")
        self.logger.setLevel(level)

        # Avoid adding duplicate handlers if this class is instantiated multiple times
        if not self.logger.handlers:
            handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            handler.setLevel(level)

            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            handler.setFormatter(formatter)

            self.logger.addHandler(handler)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

"""
Logging utilities for the UDP password generator.

The client and the server share one package logger, "udp_passgen"; each
component logs through a child of it ("udp_passgen.server",
"udp_passgen.client") so records carry the side they came from.
"""

import logging
import os
import sys
from typing import Optional, Union

from udp_passgen.utils.config import verbosity_to_level


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Logger:
    """Package logger with console and optional file output"""

    def __init__(self, name: str = "udp_passgen", log_file: Optional[str] = None,
                 level: Union[int, str] = logging.INFO, console: bool = True):
        """Configure the named logger, replacing any handlers it already has

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level, or a verbosity name such as "debug"
            console: Whether to log to stdout
        """
        level = verbosity_to_level(level)
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handlers = []
        if console:
            handlers.append(logging.StreamHandler(sys.stdout))
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def get_logger(self) -> logging.Logger:
        """Get the logger instance"""
        return self.logger

    def component(self, side: str) -> logging.Logger:
        """Get the logger for one side of the exchange, e.g. "server" """
        return self.logger.getChild(side)

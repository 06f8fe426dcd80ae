# consulta_cnpj/infrastructure/log.py
#
# Shared logging setup with elapsed time since process start.
#
# Design decisions:
#   - Modules log through logging.getLogger(__name__); only this module touches
#     handlers.
#   - configure_logging is idempotent: create_app may run several times in one
#     process (tests) without stacking handlers.
from __future__ import annotations

import logging
import sys
import time

_start = time.time()
_HANDLER_NAME = "consulta-cnpj"


class ElapsedFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        elapsed = record.created - _start
        minutes, seconds = divmod(max(int(elapsed), 0), 60)
        line = f"[consulta-cnpj {minutes:02d}:{seconds:02d}] {record.levelname} {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str = "INFO") -> None:
    """Install one stdout handler on the package logger."""
    logger = logging.getLogger("consulta_cnpj")
    logger.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(ElapsedFormatter())
    logger.addHandler(handler)

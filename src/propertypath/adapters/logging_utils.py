import logging
import json
import sys
import time
from .config import config

_BASE_KEYS = ("ts", "level", "logger", "message")


class JsonLogFormatter(logging.Formatter):
    """One JSON object per calculator event, e.g. portfolio_simulated or calculator_input_rejected."""

    def format(self, record):
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # calculator figures (final_equity, rejected field, ...) sit beside the
        # event name; they never replace the base keys
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update({k: v for k, v in ctx.items() if k not in _BASE_KEYS})
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        # dates and tuples from the result records
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)
        logger.propagate = False
    return logger

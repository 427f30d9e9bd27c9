import logging
from typing import Optional, Union

import os


class DebugFilter(logging.Filter):
    def filter(self, record):
        message = record.getMessage()
        request_details = message.startswith("HTTP Request:")
        debug_message = record.levelno == logging.DEBUG
        return request_details or debug_message


class InfoFilter(logging.Filter):
    def filter(self, record):
        # httpx reports every outgoing request at INFO
        return not record.getMessage().startswith("HTTP Request:")


formatter = logging.Formatter(
    fmt="%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

logger = logging.getLogger()
logger.setLevel(logging.DEBUG)

console_handler = logging.StreamHandler()
console_handler.setLevel(logging.INFO)
console_handler.addFilter(InfoFilter())
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)


def add_file_handlers(log_dir: Optional[str]) -> None:
    """Write INFO and above to applog.log and DEBUG to applog_debug.log in log_dir."""
    if not log_dir:
        return
    os.makedirs(log_dir, exist_ok=True)

    info_handler = logging.FileHandler(os.path.join(log_dir, "applog.log"))
    info_handler.setLevel(logging.INFO)
    info_handler.addFilter(InfoFilter())
    info_handler.setFormatter(formatter)

    debug_handler = logging.FileHandler(os.path.join(log_dir, "applog_debug.log"))
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.addFilter(DebugFilter())
    debug_handler.setFormatter(formatter)

    logger.addHandler(info_handler)
    logger.addHandler(debug_handler)


add_file_handlers(os.getenv("LOG_DIR"))


def log_msg(msg: Union[str, Exception]) -> None:
    if isinstance(msg, str):
        logger.info(msg)
    else:
        logger.exception(msg, exc_info=msg, extra={"stack": True})

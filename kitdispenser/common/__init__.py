# Common utilities
from kitdispenser.common.config import Config as Config
from kitdispenser.common.logging_utils import get_logger as get_logger
from kitdispenser.common.logging_utils import setup_logger as setup_logger

__all__ = ["Config", "get_logger", "setup_logger"]

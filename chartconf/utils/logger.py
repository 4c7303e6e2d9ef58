"""日志工具"""

import sys
from loguru import logger
from chartconf.core.config import settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, level=settings.log_level, format=LOG_FORMAT)
logger.add(
    settings.log_file,
    level=settings.log_level,
    rotation="10 MB",
    retention="7 days",
    encoding="utf-8"
)

log = logger

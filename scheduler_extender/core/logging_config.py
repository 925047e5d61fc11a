"""日志配置模块"""
import sys

from loguru import logger

# 外部日志级别名称到loguru级别的映射
LOG_LEVELS = {
    "TRACE": "TRACE",
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
    "ALERT": "CRITICAL",
}

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def resolve_log_level(value: str) -> str:
    """将LOG_LEVEL配置解析为loguru日志级别

    Args:
        value: 配置中的日志级别，大小写不敏感

    Returns:
        str: loguru日志级别名称，无法识别时回退到INFO
    """
    level = (value or "").strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f'LOG_LEVEL="{level}" 为空或无效，回退到 "INFO"')
        return "INFO"
    return LOG_LEVELS[level]


def setup_logging(level: str) -> str:
    """配置loguru输出

    Args:
        level: 配置中的日志级别

    Returns:
        str: 实际生效的loguru日志级别
    """
    resolved = resolve_log_level(level)
    logger.remove()
    logger.add(sys.stderr, level=resolved, format=LOG_FORMAT, colorize=True)
    logger.info(f"日志级别已设置为 {resolved}")
    return resolved

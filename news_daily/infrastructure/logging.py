"""日志配置模块"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> None:
    """
    配置日志系统：控制台输出，另外可选地写入按天轮转的日志文件

    Args:
        log_dir: 日志目录，为 None 时只输出到控制台
        level: 日志级别
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> | {message}")

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)

    # 主日志文件，每天午夜轮转，保留30天
    logger.add(
        log_dir / "news_daily_{time:YYYY-MM-DD}.log",
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        level=level,
        format=LOG_FORMAT,
    )

    # 错误日志保留更久
    logger.add(
        log_dir / "error_{time:YYYY-MM-DD}.log",
        rotation="00:00",
        retention="90 days",
        compression="zip",
        encoding="utf-8",
        level="ERROR",
        format=LOG_FORMAT,
    )

    logger.debug(f"日志系统已配置，日志文件保存在 {log_dir}")

"""
loguru 로거 설정입니다. 로그 레벨은 `LOG_LEVEL` 환경 변수로 정합니다.
"""

import sys

from loguru import logger

import config

log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}:{function}:{line}</>',
        '{message}',
    )
)

logger.remove()
logger.add(sys.stderr, format=log_format, level=config.LOG_LEVEL)

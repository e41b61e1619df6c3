# app/core/logging.py
# -----------------------------------------------------------------------------
# Loguru 기반 로깅 설정
# - 회전/백트레이스/레벨 지정 (settings 값 사용)
# - main.py에서 import 하는 시점에 한 번 적용
# -----------------------------------------------------------------------------
from pathlib import Path

from loguru import logger

from app.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(exist_ok=True, parents=True)

logger.remove()  # 기본 핸들러 제거
logger.add(
    LOG_DIR / "app.log",
    rotation=settings.LOG_ROTATION,
    retention=settings.LOG_RETENTION,
    enqueue=True,  # 멀티프로세스 안전
    backtrace=True,
    diagnose=settings.ENV == "dev",
    level=settings.LOG_LEVEL,
)

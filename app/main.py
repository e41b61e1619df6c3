# app/main.py
# -----------------------------------------------------------------------------
# FastAPI 엔트리포인트
# - 로깅 설정 적용 후 라우터 등록
# - 저장소 없음: 모든 계산은 요청 본문만으로 수행
# -----------------------------------------------------------------------------
from fastapi import FastAPI
from loguru import logger

from app.core import logging as app_logging  # noqa: F401  (loguru 핸들러 등록)
from app.core.config import settings
from app.routers import roi

app = FastAPI(title=settings.APP_NAME)

app.include_router(roi.router)


@app.on_event("startup")
async def on_startup():
    logger.info(f"{settings.APP_NAME} 시작 (env={settings.ENV})")


@app.get("/health")
async def health():
    return {"status": "ok"}

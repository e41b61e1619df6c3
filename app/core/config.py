# app/core/config.py
# -----------------------------------------------------------------------------
# 전역 설정 관리 (pydantic-settings v2)
# - .env 파일과 OS 환경변수를 읽어 Settings 객체로 제공
# - 계산식 상수는 여기 두지 않음 (services/roi.py 고정)
# -----------------------------------------------------------------------------
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본
    APP_NAME: str = "Receptionist ROI"
    ENV: str = "dev"

    # 로깅
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: int | str = 10  # 정수: 보관 파일 수, 문자열: 기간 ("10 days")

    # 폼 초기값
    DEFAULT_INDUSTRY: str = "plumbing"

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # .env에 추가 필드 무시
    )

    @field_validator("LOG_RETENTION", mode="before")
    @classmethod
    def _retention_count(cls, v):
        # 환경변수 "10" -> 10 (loguru는 숫자 문자열을 기간으로 해석하지 못함)
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v


settings = Settings()

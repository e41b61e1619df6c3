import os
import tempfile

import pytest

# 테스트 로그는 임시 디렉터리로
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "roi_test_logs"))
os.environ.setdefault("ENV", "test")

from fastapi.testclient import TestClient

from app.main import app
from app.schemas.roi import ROIInputs


@pytest.fixture(scope="module")
def client():
    """Yields a TestClient with lifespan events."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def default_inputs() -> ROIInputs:
    """Worked example: plumbing preset values on the stock form."""
    return ROIInputs(
        business_hour_calls=5,
        after_hour_calls=1,
        missed_business_hour_calls=3,
        avg_call_duration=5,
        sales_call_percentage=10,
        days_open="weekdays",
        avg_lead_value=450,
        conversion_rate=18,
        industry="plumbing",
        total_human_cost=2500,
        ai_setup_fee=1000,
        ai_subscription_cost=500,
        ai_per_minute_cost=0.65,
    )

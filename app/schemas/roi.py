# app/schemas/roi.py
# -----------------------------------------------------------------------------
# AI 리셉셔니스트 ROI 계산용 스키마
# - 입력값 하한 검증 없음 (음수도 그대로 계산에 전달)
# - days_open은 str로 받고, 알 수 없는 값은 계산 단계에서 30일로 처리
# -----------------------------------------------------------------------------
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

# 일일 통화 수 상한 (float 변환 가능한 범위 유지, 하한은 두지 않음)
MAX_CALLS_PER_DAY = 1_000_000


class DaysOpenMode(str, Enum):
    WEEKDAYS = "weekdays"  # 월~금
    SIXDAYS = "sixdays"  # 월~토
    ALLDAYS = "alldays"  # 매일


class ROIInputs(BaseModel):
    # 통화량 (일 단위)
    business_hour_calls: int = Field(5, le=MAX_CALLS_PER_DAY)
    after_hour_calls: int = Field(1, le=MAX_CALLS_PER_DAY)
    missed_business_hour_calls: int = Field(3, le=MAX_CALLS_PER_DAY)
    avg_call_duration: float = 5  # 분
    sales_call_percentage: float = 10  # 0~100
    days_open: str = Field(
        DaysOpenMode.WEEKDAYS.value,
        description="weekdays | sixdays | alldays (그 외 값은 30일)",
    )

    # 매출 가정
    avg_lead_value: float = 450
    conversion_rate: float = 10  # 0~100
    industry: str = "plumbing"

    # 비용
    total_human_cost: float = 2500  # 월 고정
    ai_setup_fee: float = 1000  # 1회성
    ai_subscription_cost: float = 500  # 월 고정
    ai_per_minute_cost: float = 0.65


class ROIMetrics(BaseModel):
    days_per_month: int

    # 통화 분석 (월 단위)
    total_monthly_calls: float
    total_missed_calls: float
    sales_missed_calls: float
    total_minutes: float

    # AI 비용
    ai_base_cost: float
    ai_usage_cost: float
    ai_total_monthly_cost: float
    ai_setup_fee: float
    ai_setup_fee_monthly: float
    ai_total_cost_with_setup: float

    # 효과
    human_cost: float
    cost_savings: float
    potential_revenue: float
    net_benefit: float
    roi_percent: float
    first_year_investment: float
    annual_benefit: float
    payback_period_months: float

    # 연 환산
    yearly_cost_savings: float
    yearly_potential_revenue: float
    yearly_net_benefit: float

    @property
    def total_benefit(self) -> float:
        return self.net_benefit


class IndustryPreset(BaseModel):
    industry: str
    label: str
    avg_lead_value: float
    conversion_rate: float


class ChartPoint(BaseModel):
    name: str = "Monthly"
    human_cost: float
    total_ai_cost: float
    total_benefit: float


class Insight(BaseModel):
    kind: str
    message: str


class ROISummary(BaseModel):
    first_year_investment: float
    first_year_net_return: float
    monthly_net_return: float
    annual_net_return: float
    benefit_over_cost_difference: float
    return_per_dollar: float
    payback_label: str


class ROIReport(BaseModel):
    inputs: ROIInputs
    metrics: ROIMetrics
    chart: List[ChartPoint]
    summary: ROISummary
    insights: List[Insight]

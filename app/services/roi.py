# app/services/roi.py
# -----------------------------------------------------------------------------
# ROI 계산 엔진
# - 입력 스냅샷 -> 지표 스냅샷 (순수 함수, I/O 없음)
# - 0으로 나누는 경우는 나누기 전에 막고 0 반환
# -----------------------------------------------------------------------------
from app.schemas.roi import DaysOpenMode, ROIInputs, ROIMetrics

DAYS_PER_MONTH = {
    DaysOpenMode.WEEKDAYS.value: 22,
    DaysOpenMode.SIXDAYS.value: 26,
    DaysOpenMode.ALLDAYS.value: 30,
}
DEFAULT_DAYS_PER_MONTH = 30
AFTER_HOURS_DAYS = 30  # 영업시간 외 통화는 매일 발생
SETUP_AMORTIZATION_MONTHS = 12


def days_per_month(mode: str) -> int:
    """영업일 모드 -> 월 영업일수. 알 수 없는 모드는 30일."""
    return DAYS_PER_MONTH.get(mode, DEFAULT_DAYS_PER_MONTH)


def compute(inputs: ROIInputs) -> ROIMetrics:
    days = days_per_month(inputs.days_open)

    # 통화량
    total_calls = (
        inputs.business_hour_calls * days + inputs.after_hour_calls * AFTER_HOURS_DAYS
    )
    missed_biz = inputs.missed_business_hour_calls * days
    after_hours = inputs.after_hour_calls * AFTER_HOURS_DAYS
    missed = missed_biz + after_hours
    minutes = total_calls * inputs.avg_call_duration

    # 놓친 매출
    sales_missed = missed * (inputs.sales_call_percentage / 100)
    value_per_call = inputs.avg_lead_value * (inputs.conversion_rate / 100)
    potential_revenue = sales_missed * value_per_call

    # AI 비용 (셋업비는 12개월 분할)
    ai_base = inputs.ai_subscription_cost
    ai_usage = minutes * inputs.ai_per_minute_cost
    ai_monthly = ai_base + ai_usage
    setup_monthly = inputs.ai_setup_fee / SETUP_AMORTIZATION_MONTHS
    ai_with_setup = ai_monthly + setup_monthly

    cost_savings = inputs.total_human_cost - ai_monthly
    net_benefit = cost_savings + potential_revenue

    roi = (net_benefit / ai_with_setup) * 100 if ai_with_setup > 0 else 0.0

    first_year = ai_monthly * 12 + inputs.ai_setup_fee
    annual_benefit = net_benefit * 12
    payback = (first_year / annual_benefit) * 12 if annual_benefit > 0 else 0.0

    return ROIMetrics(
        days_per_month=days,
        total_monthly_calls=total_calls,
        total_missed_calls=missed,
        sales_missed_calls=sales_missed,
        total_minutes=minutes,
        ai_base_cost=ai_base,
        ai_usage_cost=ai_usage,
        ai_total_monthly_cost=ai_monthly,
        ai_setup_fee=inputs.ai_setup_fee,
        ai_setup_fee_monthly=setup_monthly,
        ai_total_cost_with_setup=ai_with_setup,
        human_cost=inputs.total_human_cost,
        cost_savings=cost_savings,
        potential_revenue=potential_revenue,
        net_benefit=net_benefit,
        roi_percent=roi,
        first_year_investment=first_year,
        annual_benefit=annual_benefit,
        payback_period_months=payback,
        yearly_cost_savings=cost_savings * 12,
        yearly_potential_revenue=potential_revenue * 12,
        yearly_net_benefit=net_benefit * 12,
    )

# app/services/report.py
# -----------------------------------------------------------------------------
# 계산 결과 -> 화면용 데이터 (차트 시리즈 / 요약 / 인사이트 문구)
# - 지표 스냅샷만 사용, 입력값을 다시 읽지 않음
# -----------------------------------------------------------------------------
from __future__ import annotations

from app.schemas.roi import (
    ChartPoint,
    Insight,
    ROIInputs,
    ROIMetrics,
    ROIReport,
    ROISummary,
)
from app.services.roi import compute


def _money(v: float) -> str:
    return f"${v:.2f}"


def format_payback(months: float) -> str:
    if months <= 0:
        return "N/A"
    if months > 12:
        return f"{months / 12:.1f} years"
    return f"{months:.1f} months"


def chart_series(m: ROIMetrics) -> ChartPoint:
    return ChartPoint(
        name="Monthly",
        human_cost=m.human_cost,
        total_ai_cost=m.ai_total_monthly_cost + m.ai_setup_fee_monthly,
        total_benefit=m.net_benefit,
    )


def summarize(m: ROIMetrics) -> ROISummary:
    monthly_net = m.net_benefit - m.ai_setup_fee_monthly
    return ROISummary(
        first_year_investment=m.first_year_investment,
        first_year_net_return=m.yearly_net_benefit - m.ai_setup_fee,
        monthly_net_return=monthly_net,
        annual_net_return=monthly_net * 12,
        benefit_over_cost_difference=m.net_benefit
        - (m.human_cost - m.ai_total_cost_with_setup),
        return_per_dollar=m.roi_percent / 100 + 1,
        payback_label=format_payback(m.payback_period_months),
    )


def build_insights(m: ROIMetrics) -> list[Insight]:
    """
    조건부 인사이트 목록. 순서: 부재중 통화 -> 월 순수익 -> 효과 분해 -> 회수기간 -> ROI
    """
    out: list[Insight] = []
    s = summarize(m)

    if m.total_missed_calls > 0:
        out.append(
            Insight(
                kind="missed_calls",
                message=(
                    f"Your business is missing approximately {m.total_missed_calls:.0f} "
                    "calls per month that could be captured with an AI receptionist."
                ),
            )
        )

    if m.cost_savings > 0:
        out.append(
            Insight(
                kind="net_return",
                message=(
                    f"Monthly net return: {_money(s.monthly_net_return)}. "
                    f"This comes from cost savings of {_money(m.cost_savings)} "
                    f"(human cost {_money(m.human_cost)} - AI monthly cost "
                    f"{_money(m.ai_total_monthly_cost)}), added revenue of "
                    f"{_money(m.potential_revenue)} from captured missed calls, and a "
                    f"setup fee of -{_money(m.ai_setup_fee_monthly)} (amortized monthly). "
                    f"Your annual net return totals {_money(s.annual_net_return)}."
                ),
            )
        )

    if m.net_benefit > 0:
        out.append(
            Insight(
                kind="benefit_breakdown",
                message=(
                    f"This total monthly benefit of {_money(m.net_benefit)} includes both "
                    f"cost savings ({_money(m.cost_savings)}) and new revenue from "
                    f"captured calls ({_money(m.potential_revenue)}), which is "
                    f"{_money(s.benefit_over_cost_difference)} more than just the cost "
                    "difference between human and AI receptionists."
                ),
            )
        )

    if m.payback_period_months > 0:
        out.append(
            Insight(
                kind="payback",
                message=(
                    "Your investment will pay for itself in "
                    f"{m.payback_period_months:.1f} months, after which the solution "
                    "becomes pure profit-generating compared to your current situation."
                ),
            )
        )

    if m.roi_percent > 0:
        out.append(
            Insight(
                kind="roi",
                message=(
                    f"Your direct ROI of {m.roi_percent:.0f}% indicates that for every "
                    "dollar invested in the AI receptionist solution, you'll receive "
                    f"{_money(s.return_per_dollar)} in return."
                ),
            )
        )

    return out


def build_report(inputs: ROIInputs) -> ROIReport:
    metrics = compute(inputs)
    return ROIReport(
        inputs=inputs,
        metrics=metrics,
        chart=[chart_series(metrics)],
        summary=summarize(metrics),
        insights=build_insights(metrics),
    )

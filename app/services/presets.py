# app/services/presets.py
# -----------------------------------------------------------------------------
# 홈서비스 업종별 기본값 (고객 가치 / 전환율)
# - lookup_preset: 조회만 (없으면 None)
# - apply_preset : 입력 스냅샷 복사본에 병합, 원본은 변경하지 않음
# -----------------------------------------------------------------------------
from __future__ import annotations

from loguru import logger

from app.schemas.roi import IndustryPreset, ROIInputs

# tag: (label, avg_lead_value, conversion_rate)
INDUSTRY_PRESETS: dict[str, tuple[str, float, float]] = {
    "plumbing": ("Plumbing", 450, 18),
    "hvac": ("HVAC", 600, 15),
    "electrician": ("Electrician", 350, 20),
    "landscaping": ("Landscaping & Lawn Care", 300, 22),
    "cleaning": ("Cleaning Services", 250, 25),
    "roofing": ("Roofing", 1200, 12),
    "painting": ("Painting", 800, 15),
    "carpentry": ("Carpentry & Handyman", 650, 18),
    "flooring": ("Flooring Installation", 900, 15),
    "pest_control": ("Pest Control", 200, 30),
    "other": ("Other Home Services", 500, 15),
}


def lookup_preset(industry: str) -> IndustryPreset | None:
    row = INDUSTRY_PRESETS.get(industry)
    if row is None:
        return None
    label, lead_value, conversion = row
    return IndustryPreset(
        industry=industry,
        label=label,
        avg_lead_value=lead_value,
        conversion_rate=conversion,
    )


def list_presets() -> list[IndustryPreset]:
    return [lookup_preset(tag) for tag in INDUSTRY_PRESETS]


def apply_preset(inputs: ROIInputs, industry: str) -> ROIInputs:
    """
    업종 선택 반영. 프리셋이 있으면 avg_lead_value/conversion_rate를 덮어쓰고,
    없으면 industry 값만 바꾼다 (단방향, 이후 수정값은 업종에 역반영되지 않음).
    """
    update: dict = {"industry": industry}
    preset = lookup_preset(industry)
    if preset is None:
        logger.info(f"[preset] 알 수 없는 업종 '{industry}', 기본값 덮어쓰기 생략")
    else:
        update["avg_lead_value"] = preset.avg_lead_value
        update["conversion_rate"] = preset.conversion_rate
    return inputs.model_copy(update=update)

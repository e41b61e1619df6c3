# app/routers/roi.py
# -----------------------------------------------------------------------------
# /roi/compute                 : 입력 스냅샷 -> 지표 (입력 변경 시마다 호출)
# /roi/report                  : 지표 + 차트 + 요약 + 인사이트
# /roi/presets[/{industry}]    : 업종 기본값 조회 / 병합
# -----------------------------------------------------------------------------
from fastapi import APIRouter, HTTPException
from loguru import logger

from app.core.config import settings
from app.schemas.roi import IndustryPreset, ROIInputs, ROIMetrics, ROIReport
from app.services.presets import apply_preset, list_presets, lookup_preset
from app.services.report import build_report
from app.services.roi import compute

router = APIRouter(prefix="/roi", tags=["roi"])


@router.get("/defaults", response_model=ROIInputs)
async def defaults():
    return apply_preset(ROIInputs(), settings.DEFAULT_INDUSTRY)


@router.post("/compute", response_model=ROIMetrics)
async def compute_roi(req: ROIInputs):
    try:
        return compute(req)
    except Exception as e:
        logger.exception(f"[roi] compute 실패: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/report", response_model=ROIReport)
async def report(req: ROIInputs):
    try:
        return build_report(req)
    except Exception as e:
        logger.exception(f"[roi] report 실패: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/presets", response_model=list[IndustryPreset])
async def presets():
    return list_presets()


@router.get("/presets/{industry}", response_model=IndustryPreset)
async def preset(industry: str):
    found = lookup_preset(industry)
    if found is None:
        raise HTTPException(404, detail=f"unknown industry: {industry}")
    return found


@router.post("/presets/{industry}/apply", response_model=ROIInputs)
async def apply(industry: str, req: ROIInputs):
    return apply_preset(req, industry)

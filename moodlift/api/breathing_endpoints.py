"""
Breathing API endpoints - Guided breathing session plans
"""
from fastapi import APIRouter, Query

from moodlift.core.exceptions import NotFoundError, RequestValidationFailed
from moodlift.schemas.base import Envelope
from moodlift.schemas.breathing import BreathingCycleRead, BreathingPresetRead
from moodlift.services.breathing import PRESETS, SESSION_MINUTES, build_preset

router = APIRouter(prefix="/api/breathing", tags=["breathing"])


@router.get("/presets", response_model=Envelope[list[str]])
async def list_presets():
    return Envelope(status="ok", data=sorted(PRESETS))


@router.get("/presets/{name}", response_model=Envelope[BreathingPresetRead])
async def get_preset(
    name: str,
    minutes: int = Query(SESSION_MINUTES[0]),
):
    """
    Phase-by-phase plan for a breathing session

    - **name**: diaphragmatic-breathing, box-breathing or 4-7-8-breathing
    - **minutes**: Session length, one of 2, 3 or 5
    """
    if name not in PRESETS:
        raise NotFoundError("Breathing preset", name)
    if minutes not in SESSION_MINUTES:
        raise RequestValidationFailed(
            f"minutes must be one of {', '.join(str(m) for m in SESSION_MINUTES)}",
            details={"allowed": list(SESSION_MINUTES)},
        )

    config = build_preset(name, minutes)
    return Envelope(
        status="ok",
        data=BreathingPresetRead(
            name=name,
            minutes=minutes,
            total_duration=config.duration,
            cycles=[
                BreathingCycleRead(phase=c.phase.value, duration=c.duration, instruction=c.instruction)
                for c in config.cycles
            ],
        )
    )

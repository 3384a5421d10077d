from pydantic import BaseModel


class BreathingCycleRead(BaseModel):
    phase: str
    duration: int
    instruction: str


class BreathingPresetRead(BaseModel):
    name: str
    minutes: int
    total_duration: int
    cycles: list[BreathingCycleRead]

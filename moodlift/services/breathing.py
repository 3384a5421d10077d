"""
Guided breathing countdown.

`BreathingGuide` walks a list of timed phases one second per `tick()`. After
the last phase runs out it lands in a terminal complete state where
`cycle_index == len(cycles)` and further ticks do nothing.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class BreathingPhase(str, Enum):
    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"
    REST = "rest"


@dataclass(frozen=True)
class BreathingCycle:
    phase: BreathingPhase
    duration: int
    instruction: str = ""

    def __post_init__(self):
        if self.duration < 1:
            raise ValueError(f"duration must be a positive number of seconds, got {self.duration}")


@dataclass(frozen=True)
class BreathingGuideConfig:
    cycles: List[BreathingCycle]
    name: str = ""
    total_duration: Optional[int] = None

    @property
    def duration(self) -> int:
        """Configured total, falling back to the sum of phase durations."""
        if self.total_duration:
            return self.total_duration
        return sum(c.duration for c in self.cycles)


class BreathingGuide:
    """Countdown state machine over a fixed sequence of breathing phases."""

    def __init__(self, config: BreathingGuideConfig):
        self.config = config
        self.is_running = False
        self.cycle_index = 0
        self.time_left = config.cycles[0].duration if config.cycles else 0
        self.total_time_elapsed = 0

    @property
    def total_cycles(self) -> int:
        return len(self.config.cycles)

    @property
    def is_complete(self) -> bool:
        return self.cycle_index >= self.total_cycles

    @property
    def current_cycle(self) -> Optional[BreathingCycle]:
        if self.is_complete:
            return None
        return self.config.cycles[self.cycle_index]

    @property
    def current_phase(self) -> BreathingPhase:
        cycle = self.current_cycle
        return cycle.phase if cycle else BreathingPhase.INHALE

    @property
    def current_instruction(self) -> str:
        cycle = self.current_cycle
        return cycle.instruction if cycle else ""

    @property
    def progress(self) -> float:
        """Elapsed share of the session, in percent."""
        duration = self.config.duration
        if not duration:
            return 100.0 if self.is_complete else 0.0
        return min(100.0, self.total_time_elapsed / duration * 100)

    def start(self) -> None:
        if not self.is_complete:
            self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def reset(self) -> None:
        self.is_running = False
        self.cycle_index = 0
        self.time_left = self.config.cycles[0].duration if self.config.cycles else 0
        self.total_time_elapsed = 0

    def tick(self) -> bool:
        """
        Advance one second.

        Returns:
            True if this tick moved the guide into a new phase or into the
            complete state.
        """
        if not self.is_running or self.is_complete:
            return False

        self.total_time_elapsed += 1
        if self.time_left > 1:
            self.time_left -= 1
            return False

        self.cycle_index += 1
        if self.is_complete:
            self.time_left = 0
            self.is_running = False
        else:
            self.time_left = self.config.cycles[self.cycle_index].duration
        return True

    def snapshot(self) -> Dict[str, object]:
        return {
            "name": self.config.name,
            "is_running": self.is_running,
            "current_phase": self.current_phase.value,
            "current_instruction": self.current_instruction,
            "time_left": self.time_left,
            "progress": self.progress,
            "is_complete": self.is_complete,
            "cycle_index": self.cycle_index,
            "total_cycles": self.total_cycles,
        }

    async def run(
        self,
        interval_seconds: float = 1.0,
        on_tick: Optional[Callable[["BreathingGuide"], Awaitable[None]]] = None,
    ) -> None:
        """Start the guide and tick it until it completes or is paused."""
        self.start()
        while self.is_running:
            await asyncio.sleep(interval_seconds)
            if not self.is_running:
                break
            self.tick()
            if on_tick is not None:
                await on_tick(self)
        if self.is_complete:
            logger.debug(f"Breathing session '{self.config.name}' complete after {self.total_time_elapsed}s")


DIAPHRAGMATIC_BASE_CYCLE: List[BreathingCycle] = [
    BreathingCycle(BreathingPhase.INHALE, 4, "Breathe in through your nose slowly"),
    BreathingCycle(BreathingPhase.HOLD, 4, "Hold your breath gently"),
    BreathingCycle(BreathingPhase.EXHALE, 6, "Exhale slowly through your mouth"),
    BreathingCycle(BreathingPhase.REST, 2, "Rest and prepare for the next breath"),
]

BOX_BASE_CYCLE: List[BreathingCycle] = [
    BreathingCycle(BreathingPhase.INHALE, 4, "Breathe in for four"),
    BreathingCycle(BreathingPhase.HOLD, 4, "Hold at the top"),
    BreathingCycle(BreathingPhase.EXHALE, 4, "Breathe out for four"),
    BreathingCycle(BreathingPhase.REST, 4, "Hold at the bottom"),
]

FOUR_SEVEN_EIGHT_BASE_CYCLE: List[BreathingCycle] = [
    BreathingCycle(BreathingPhase.INHALE, 4, "Inhale quietly through your nose"),
    BreathingCycle(BreathingPhase.HOLD, 7, "Hold your breath"),
    BreathingCycle(BreathingPhase.EXHALE, 8, "Exhale completely through your mouth"),
]

PRESETS: Dict[str, List[BreathingCycle]] = {
    "diaphragmatic-breathing": DIAPHRAGMATIC_BASE_CYCLE,
    "box-breathing": BOX_BASE_CYCLE,
    "4-7-8-breathing": FOUR_SEVEN_EIGHT_BASE_CYCLE,
}

SESSION_MINUTES = (2, 3, 5)


def generate_breathing_cycles(base_cycle: List[BreathingCycle], duration_minutes: int) -> List[BreathingCycle]:
    """Repeat a base cycle as many whole times as fit in the session.

    A closing rest phase gets the plain instruction "Rest".
    """
    base_duration = sum(c.duration for c in base_cycle)
    if base_duration <= 0:
        return []
    repeat = (duration_minutes * 60) // base_duration

    cycles: List[BreathingCycle] = []
    for _ in range(repeat):
        cycles.extend(base_cycle)
    if cycles and cycles[-1].phase == BreathingPhase.REST:
        cycles[-1] = replace(cycles[-1], instruction="Rest")
    return cycles


def build_preset(name: str, duration_minutes: int) -> BreathingGuideConfig:
    """Build the guide config for a named exercise; KeyError for unknown names."""
    cycles = generate_breathing_cycles(PRESETS[name], duration_minutes)
    return BreathingGuideConfig(
        cycles=cycles,
        name=name,
        total_duration=sum(c.duration for c in cycles),
    )

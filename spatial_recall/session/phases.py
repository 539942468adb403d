"""
Phases - The timed reveal of a session.

The sequence:
1. Memorize: the starting configuration is shown
2. Reveal: each command appears after a blank pause, then hides
3. Answer: the player enters the final configuration
4. Result: the score and audit trail are shown

Timers are cancellable and bound to a generation number. Starting a
new run bumps the generation, so a timer left over from an earlier
session fires into nothing.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..config import PhaseTiming

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Phase of a session."""
    IDLE = "idle"
    MEMORIZE = "memorize"
    REVEAL = "reveal"
    ANSWER = "answer"
    RESULT = "result"


@dataclass(frozen=True)
class PhaseEvent:
    """
    A scheduled transition.

    During REVEAL, command_index says which command is current and
    show_text whether its description is on screen.
    """
    at_ms: int
    phase: Phase
    command_index: int | None = None
    show_text: bool = False


def build_timeline(command_count: int, timing: PhaseTiming) -> list[PhaseEvent]:
    """
    Events for a session with command_count commands.

    Instant timing (the die) skips straight to the answer phase:
    all commands are listed at once.
    """
    if timing.is_instant:
        return [PhaseEvent(at_ms=0, phase=Phase.ANSWER)]

    events = [PhaseEvent(at_ms=0, phase=Phase.MEMORIZE)]
    at = timing.memorize_ms
    for index in range(command_count):
        events.append(PhaseEvent(at_ms=at, phase=Phase.REVEAL, command_index=index))
        at += timing.command_gap_ms
        events.append(PhaseEvent(at_ms=at, phase=Phase.REVEAL, command_index=index, show_text=True))
        at += timing.command_show_ms
    events.append(PhaseEvent(at_ms=at, phase=Phase.ANSWER))
    return events


class PhaseScheduler:
    """
    Runs a timeline on cancellable timers.

    Usage:
        scheduler = PhaseScheduler()
        generation = scheduler.start(timeline, on_event)

        # Later, a new session starts:
        scheduler.start(new_timeline, on_new_event)  # old timers now no-ops

    timer_factory has the threading.Timer signature and can be
    replaced in tests.
    """

    def __init__(self, timer_factory: Callable[..., Any] = threading.Timer):
        self._timer_factory = timer_factory
        self._timers: list[Any] = []
        self._generation = 0
        self._lock = threading.RLock()

    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def start(self, timeline: list[PhaseEvent], on_event: Callable[[PhaseEvent], None]) -> int:
        """Cancel whatever is pending and schedule a new timeline."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            generation = self._generation

            for event in timeline:
                timer = self._timer_factory(event.at_ms / 1000, self._guarded(generation, event, on_event))
                timer.daemon = True
                self._timers.append(timer)
                timer.start()

        logger.debug("scheduled %d phase event(s) for generation %d", len(timeline), generation)
        return generation

    def cancel(self) -> None:
        """Cancel pending timers and invalidate the current generation."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1

    def _cancel_pending(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers.clear()

    def _guarded(
        self,
        generation: int,
        event: PhaseEvent,
        on_event: Callable[[PhaseEvent], None],
    ) -> Callable[[], None]:
        def fire() -> None:
            with self._lock:
                if generation != self._generation:
                    logger.debug("dropped stale %s event (generation %d)", event.phase.value, generation)
                    return
                on_event(event)

        return fire

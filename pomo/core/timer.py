"""Pomodoro session state machine. Pure logic, no UI.

The window (or anything else) drives this by calling toggle_running(), stop(),
adjust_focus()/adjust_break() on button presses and tick() once a second while
running, then re-renders from snapshot().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol
from pomo.common.logger import log

FOCUS_MIN, FOCUS_MAX, FOCUS_STEP = 5, 60, 5
BREAK_MIN, BREAK_MAX, BREAK_STEP = 1, 15, 1
DEFAULT_FOCUS_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5


class Phase(str, Enum):
    FOCUSING = "Focusing"
    ON_BREAK = "On Break"

    @property
    def opposite(self):
        return Phase.ON_BREAK if self is Phase.FOCUSING else Phase.FOCUSING


class Direction(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


class Notifier(Protocol):
    """Anything that can play a short "phase over" sound. Fire and forget."""

    def play(self) -> None: ...


class NullNotifier:
    def play(self) -> None:
        pass


@dataclass
class Session:
    phase: Phase
    time_remaining: int


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Optional[Phase]
    time_remaining: Optional[int]
    focus_minutes: int
    break_minutes: int
    is_running: bool
    progress: float
    progress_max: int

    @property
    def is_idle(self):
        return self.phase is None

    # Configured minutes for the phase being shown, used for the "Focusing for 25:00 minutes" title.
    @property
    def phase_minutes(self):
        if self.phase is None:
            return None
        return self.focus_minutes if self.phase is Phase.FOCUSING else self.break_minutes


def clamp(value, low, high):
    return max(low, min(high, value))


def compute_progress(progress_max, remaining):
    """Bar fill percentage for a phase `progress_max` seconds long with `remaining` seconds left.

    Full phase left -> 100, nothing left -> 0.
    """
    if progress_max <= 0:
        raise ValueError(f"progress_max must be positive, got {progress_max}")
    return 100 - (progress_max - remaining) / progress_max * 100


class PomodoroTimer:
    """Focus/break countdown.

    Idle means no session. A session is either running or paused; pausing keeps the
    remaining time exactly as it was. Duration changes only apply to the next session
    created, never to the one already counting down.
    """

    def __init__(self, focus_minutes=DEFAULT_FOCUS_MINUTES, break_minutes=DEFAULT_BREAK_MINUTES, notifier=None):
        self.focus_minutes = clamp(int(focus_minutes), FOCUS_MIN, FOCUS_MAX)
        self.break_minutes = clamp(int(break_minutes), BREAK_MIN, BREAK_MAX)
        self.notifier = notifier or NullNotifier()

        self.session: Optional[Session] = None
        self.is_running = False
        self.progress_max = 0
        self.progress = 0.0

    # ------------------------------------------------------------------ #
    #  Read-only views                                                     #
    # ------------------------------------------------------------------ #

    @property
    def phase(self):
        return self.session.phase if self.session else None

    @property
    def time_remaining(self):
        return self.session.time_remaining if self.session else None

    @property
    def is_idle(self):
        return self.session is None

    def phase_seconds(self, phase):
        minutes = self.focus_minutes if phase is Phase.FOCUSING else self.break_minutes
        return minutes * 60

    def snapshot(self):
        return TimerSnapshot(
            phase=self.phase,
            time_remaining=self.time_remaining,
            focus_minutes=self.focus_minutes,
            break_minutes=self.break_minutes,
            is_running=self.is_running,
            progress=self.progress,
            progress_max=self.progress_max,
        )

    # ------------------------------------------------------------------ #
    #  Lifecycle                                                           #
    # ------------------------------------------------------------------ #

    def toggle_running(self):
        """Play/pause. Starting from idle opens a fresh focus session."""
        self.is_running = not self.is_running
        if self.is_running:
            if self.session is None:
                self.session = Session(Phase.FOCUSING, self.phase_seconds(Phase.FOCUSING))
                log.info(f"Started new {self.session.phase.value} session of {self.focus_minutes} minutes")
            else:
                log.debug(f"Resumed {self.session.phase.value} with {self.session.time_remaining}s left")
        else:
            log.debug(f"Paused {self.session.phase.value} with {self.session.time_remaining}s left")
        return self.is_running

    def stop(self):
        if self.session is not None:
            log.info(f"Stopped {self.session.phase.value} session with {self.session.time_remaining}s left")
        self.is_running = False
        self.session = None
        self.progress_max = 0
        self.progress = 0.0

    # ------------------------------------------------------------------ #
    #  Durations                                                           #
    # ------------------------------------------------------------------ #

    def adjust_focus(self, direction):
        self.focus_minutes = self._step(self.focus_minutes, direction, FOCUS_STEP, FOCUS_MIN, FOCUS_MAX)
        log.debug(f"Focus duration now {self.focus_minutes} minutes")
        return self.focus_minutes

    def adjust_break(self, direction):
        self.break_minutes = self._step(self.break_minutes, direction, BREAK_STEP, BREAK_MIN, BREAK_MAX)
        log.debug(f"Break duration now {self.break_minutes} minutes")
        return self.break_minutes

    @staticmethod
    def _step(value, direction, step, low, high):
        direction = Direction(direction)
        delta = step if direction is Direction.INCREASE else -step
        return clamp(value + delta, low, high)

    # ------------------------------------------------------------------ #
    #  Tick                                                                #
    # ------------------------------------------------------------------ #

    def tick(self):
        """Advance the running session by one second.

        Returns True if this tick ended the phase and opened the next one. Ticks while
        idle or paused are ignored.
        """
        if self.session is None or not self.is_running:
            return False

        session = self.session
        self.progress_max = self.phase_seconds(session.phase)
        self.progress = clamp(compute_progress(self.progress_max, session.time_remaining), 0.0, 100.0)

        if session.time_remaining > 0:
            session.time_remaining = max(0, session.time_remaining - 1)
            if session.time_remaining > 0:
                return False

        self._next_phase()
        return True

    def _next_phase(self):
        self._notify()
        ended = self.session.phase
        upcoming = ended.opposite
        self.session = Session(upcoming, self.phase_seconds(upcoming))
        log.info(f"{ended.value} finished, now {upcoming.value} for {self.session.time_remaining}s")

    # Sound must never break the countdown, so anything the notifier throws stops here.
    def _notify(self):
        try:
            self.notifier.play()
        except Exception:
            log.warning("Notification sound failed, continuing", exc_info=True)

"""A countdown timer driven by explicit time steps."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GameTimer:
    """Accumulates elapsed time and reports when the duration is reached."""

    duration: float
    elapsed_time: float = field(default=0.0, init=False)
    is_running: bool = field(default=False, init=False)

    def start(self) -> None:
        self.is_running = True
        self.elapsed_time = 0.0

    def reset(self, is_running: bool = False) -> None:
        self.is_running = is_running
        self.elapsed_time = 0.0

    def update(self, dt: float) -> bool:
        """Advance by dt; return True and reset when the duration is reached."""
        self.elapsed_time += dt
        finished = self.did_finish()
        if finished:
            self.reset()
        return finished

    def did_finish(self) -> bool:
        return self.elapsed_time >= self.duration
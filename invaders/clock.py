from __future__ import annotations


class SimulationClock:
    """Frame counter; advanced exactly once per tick and never rewound."""

    def __init__(self, frame: int = 0) -> None:
        if frame < 0:
            raise ValueError(f"frame must not be negative, got {frame}")
        self._frame = frame

    @property
    def frame(self) -> int:
        return self._frame

    def tick(self) -> int:
        self._frame += 1
        return self._frame

    def every(self, frames: int) -> bool:
        """True on frames that are a multiple of `frames`."""
        return self._frame % frames == 0

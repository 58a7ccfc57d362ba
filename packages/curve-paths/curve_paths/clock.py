"""FrameClock - splits real frame time into fixed animation steps."""


class FrameClock:
    """Fixed-timestep accumulator for animation time.

    Real elapsed milliseconds go in through accumulate(); whole steps of
    dt come out, and the remainder carries over to the next frame. A
    single frame never yields more than max_steps, so a long stall does
    not replay a backlog of steps.
    """

    def __init__(self, fps: int, max_steps: int = 30) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        if max_steps <= 0:
            raise ValueError("max_steps must be positive")
        self._fps = fps
        self._dt = 1000.0 / fps
        self._max_steps = max_steps
        self._pending = 0.0
        self._steps = 0

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        """Milliseconds per step."""
        return self._dt

    @property
    def steps(self) -> int:
        """Steps handed out since creation or the last reset."""
        return self._steps

    @property
    def pending(self) -> float:
        return self._pending

    def accumulate(self, elapsed_ms: float) -> int:
        """Add real time and return how many fixed steps are now due."""
        self._pending += elapsed_ms
        due = int(self._pending // self._dt)
        if due > self._max_steps:
            due = self._max_steps
            self._pending = 0.0
        else:
            self._pending -= due * self._dt
        self._steps += due
        return due

    def reset(self) -> None:
        self._pending = 0.0
        self._steps = 0

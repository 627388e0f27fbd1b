from backend.engine.gameclock.clock import CountdownClock, format_remaining
from backend.engine.gameclock.scheduler import Scheduler, TimerHandle

__all__ = ["CountdownClock", "Scheduler", "TimerHandle", "format_remaining"]

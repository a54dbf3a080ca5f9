"""Shared test values and fakes."""

from datetime import datetime, timedelta
from types import SimpleNamespace
from zoneinfo import ZoneInfo

UTC = ZoneInfo("UTC")

# Tuesday, mid-day: slots before 12:00 have already started
FIXED_NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)


class MutableClock:
    """Clock that tests can move forward."""

    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


def completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])

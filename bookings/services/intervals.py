# bookings/services/intervals.py
from dataclasses import dataclass
from datetime import datetime, timedelta


def overlaps(start_a, end_a, start_b, end_b) -> bool:
    """
    Half-open overlap of [start_a, end_a) and [start_b, end_b).
    A window ending exactly when the other starts does not overlap it.
    """
    return (start_a < end_b) and (start_b < end_a)


@dataclass(frozen=True)
class Interval:
    start: datetime
    end: datetime

    def __post_init__(self):
        if not self.end > self.start:
            raise ValueError(f"interval end {self.end} must be after start {self.start}")

    @classmethod
    def from_duration(cls, start, hours):
        return cls(start, start + timedelta(hours=hours))

    @property
    def hours(self):
        return (self.end - self.start).total_seconds() / 3600

    def overlaps(self, other: "Interval") -> bool:
        return overlaps(self.start, self.end, other.start, other.end)

    def as_dict(self):
        return {"start": self.start, "end": self.end}

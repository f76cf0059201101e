"""
Data models for the localdates generators.

Contains the closed interval of day offsets the date sources sample from.
"""

from dataclasses import dataclass
from datetime import date

from localdates.arguments import check_arguments
from localdates.date_utils import date_from_offset, offset_from_date


@dataclass(frozen=True)
class DayInterval:
    """Closed interval of day offsets counted from the epoch.
    
    Attributes:
        start: First day offset (inclusive)
        end: Last day offset (inclusive), never smaller than start
    """
    start: int
    end: int
    
    def __post_init__(self):
        check_arguments(
            self.start <= self.end,
            "Interval start (%s) is after its end (%s)",
            self.start, self.end
        )
    
    @classmethod
    def around_epoch(cls, days_from_epoch: int) -> "DayInterval":
        """Create the interval spanning the epoch and the given offset.
        
        The epoch is always one of the endpoints, whatever the sign of
        ``days_from_epoch``.
        """
        return cls(min(0, days_from_epoch), max(0, days_from_epoch))
    
    @property
    def start_date(self) -> date:
        return date_from_offset(self.start)
    
    @property
    def end_date(self) -> date:
        return date_from_offset(self.end)
    
    @property
    def is_degenerate(self) -> bool:
        """True when the interval holds a single day."""
        return self.start == self.end
    
    def contains(self, days_from_epoch: int) -> bool:
        return self.start <= days_from_epoch <= self.end
    
    def contains_date(self, value: date) -> bool:
        return self.contains(offset_from_date(value))
    
    def __len__(self) -> int:
        return self.end - self.start + 1
    
    def __str__(self) -> str:
        return f"[{self.start_date.isoformat()} .. {self.end_date.isoformat()}]"

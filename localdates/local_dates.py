"""
Date sources for property-based tests.

Builds sources of ``datetime.date`` values bounded by day offsets from the
epoch (1970-01-01). Every source is weighted so the dates at the ends of its
interval turn up far more often than uniform sampling alone would give them,
since boundary dates are where date handling usually breaks.

Example:
    >>> source = with_days_between(-10, 10)
    >>> dates = source.sample(200)
"""

import logging
from typing import Optional

from localdates.arguments import check_arguments, is_integral
from localdates.config import Config, config
from localdates.date_utils import (
    MIN_EPOCH_DAY,
    MAX_EPOCH_DAY,
    date_from_offset,
    is_representable,
    offset_from_date,
)
from localdates.models import DayInterval
from localdates.sources import MappedSource, WeightedSource, integer_range, weight_with_values


logger = logging.getLogger(__name__)


class LocalDates:
    """Builds weighted date sources from day offsets.
    
    Offsets are validated against the configured day window before any
    source is constructed; a failed check raises InvalidArgument and
    nothing is built.
    """
    
    def __init__(self, cfg: Optional[Config] = None):
        """Initialize LocalDates with configuration.
        
        Args:
            cfg: Configuration object. Uses default if not provided.
            
        Raises:
            InvalidArgument: If the configured day window is empty or not
                representable as dates
        """
        self.config = cfg or config
        check_arguments(
            is_representable(self.config.MIN_DAY) and is_representable(self.config.MAX_DAY)
            and self.config.MIN_DAY <= self.config.MAX_DAY,
            "Configured day window [%s , %s] must lie within [%s , %s]",
            self.config.MIN_DAY, self.config.MAX_DAY, MIN_EPOCH_DAY, MAX_EPOCH_DAY
        )
    
    def with_days(self, days_from_epoch: int) -> WeightedSource:
        """Generate dates between the epoch and the given offset, inclusive.
        
        The offset may be negative. The source is weighted so it is likely
        to produce ``date_from_offset(days_from_epoch)`` one or more times.
        
        Args:
            days_from_epoch: Days from the epoch bounding the generated dates
            
        Returns:
            Source of dates
            
        Raises:
            InvalidArgument: If the offset is outside the day window
        """
        self._check_day_in_window(days_from_epoch)
        days_from_epoch = int(days_from_epoch)
        interval = DayInterval.around_epoch(days_from_epoch)
        logger.debug(f"Building date source over {interval} weighted to {days_from_epoch}")
        return weight_with_values(
            _days_from_epoch(days_from_epoch),
            date_from_offset(days_from_epoch),
            probability=self.config.BOUNDARY_PROBABILITY
        )
    
    def with_days_between(self, start_inclusive: int, end_inclusive: int) -> WeightedSource:
        """Generate dates between two offsets from the epoch, inclusive.
        
        The source is weighted so it is likely to produce the dates at both
        ends one or more times. Offsets are not reordered.
        
        Args:
            start_inclusive: Days from the epoch of the earliest date
            end_inclusive: Days from the epoch of the latest date
            
        Returns:
            Source of dates
            
        Raises:
            InvalidArgument: If either offset is outside the day window, or
                start_inclusive is after end_inclusive
        """
        self._check_interval_in_window(start_inclusive, end_inclusive)
        self._check_ordered(start_inclusive, end_inclusive)
        start_inclusive, end_inclusive = int(start_inclusive), int(end_inclusive)
        logger.debug(f"Building date source over [{start_inclusive} , {end_inclusive}]")
        return weight_with_values(
            _days_between(start_inclusive, end_inclusive),
            date_from_offset(end_inclusive),
            date_from_offset(start_inclusive),
            probability=self.config.BOUNDARY_PROBABILITY
        )
    
    def with_interval(self, interval: DayInterval) -> WeightedSource:
        """Generate dates within a DayInterval, weighted towards both ends."""
        return self.with_days_between(interval.start, interval.end)
    
    def _check_day_in_window(self, days_from_epoch) -> None:
        check_arguments(
            is_integral(days_from_epoch)
            and self.config.MIN_DAY <= days_from_epoch <= self.config.MAX_DAY,
            "The number of days from the epoch must be an integer bounded between [%s , %s] . "
            "%r is outside of these bounds.",
            self.config.MIN_DAY, self.config.MAX_DAY, days_from_epoch
        )
    
    def _check_interval_in_window(self, start_inclusive, end_inclusive) -> None:
        check_arguments(
            is_integral(start_inclusive) and is_integral(end_inclusive)
            and self.config.MIN_DAY <= start_inclusive <= self.config.MAX_DAY
            and self.config.MIN_DAY <= end_inclusive <= self.config.MAX_DAY,
            "The numbers of days from the epoch must be integers bounded between [%s , %s] . "
            "[%r , %r] is outside of these bounds.",
            self.config.MIN_DAY, self.config.MAX_DAY, start_inclusive, end_inclusive
        )
    
    def _check_ordered(self, start_inclusive: int, end_inclusive: int) -> None:
        check_arguments(
            start_inclusive <= end_inclusive,
            "Cannot have the end offset (%s) smaller than the start offset (%s)",
            end_inclusive, start_inclusive
        )


def _days_from_epoch(days_from_epoch: int) -> MappedSource:
    return _days_between(min(days_from_epoch, 0), max(days_from_epoch, 0))


def _days_between(start_inclusive: int, end_inclusive: int) -> MappedSource:
    return integer_range(start_inclusive, end_inclusive).as_(date_from_offset, offset_from_date)


# Default builder instance
local_dates = LocalDates()


def with_days(days_from_epoch: int) -> WeightedSource:
    """Convenience function for LocalDates.with_days using the default config."""
    return local_dates.with_days(days_from_epoch)


def with_days_between(start_inclusive: int, end_inclusive: int) -> WeightedSource:
    """Convenience function for LocalDates.with_days_between using the default config."""
    return local_dates.with_days_between(start_inclusive, end_inclusive)

"""
Date utilities for the localdates generators.

Converts between day offsets counted from the epoch (1970-01-01) and
``datetime.date`` values. The representable range of ``datetime.date``
bounds every offset the generators accept.

That range (years 1 to 9999) is narrower than the +/-999,999,999 day range
of date types in other languages; bounds ported from those must be clamped.
"""

from datetime import date


EPOCH = date(1970, 1, 1)
_EPOCH_ORDINAL = EPOCH.toordinal()

# Representable range of datetime.date, expressed as days from the epoch
MIN_EPOCH_DAY = date.min.toordinal() - _EPOCH_ORDINAL
MAX_EPOCH_DAY = date.max.toordinal() - _EPOCH_ORDINAL


def date_from_offset(days_from_epoch: int) -> date:
    """Convert a day offset from the epoch to a date.
    
    Args:
        days_from_epoch: Signed number of days relative to 1970-01-01
        
    Returns:
        The date ``days_from_epoch`` days after (or before) the epoch
        
    Raises:
        ValueError: If the offset is outside [MIN_EPOCH_DAY, MAX_EPOCH_DAY]
    """
    return date.fromordinal(_EPOCH_ORDINAL + days_from_epoch)


def offset_from_date(value: date) -> int:
    """Convert a date to its signed day offset from the epoch."""
    return value.toordinal() - _EPOCH_ORDINAL


def is_representable(days_from_epoch: int) -> bool:
    """Check whether a day offset maps to a representable date."""
    return MIN_EPOCH_DAY <= days_from_epoch <= MAX_EPOCH_DAY

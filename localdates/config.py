"""
Configuration module for the localdates generators.

Contains the accepted day window, the boundary weighting policy and the
sample runner settings.
"""

from dataclasses import dataclass
from typing import Optional

from localdates.date_utils import MIN_EPOCH_DAY, MAX_EPOCH_DAY


@dataclass
class Config:
    """Configuration class containing all system parameters."""
    
    # Day window accepted by the generators (days from 1970-01-01)
    MIN_DAY: int = MIN_EPOCH_DAY
    MAX_DAY: int = MAX_EPOCH_DAY
    
    # Boundary Weighting Configuration
    # Chance per draw that a boundary value is emitted instead of a uniform one
    BOUNDARY_PROBABILITY: float = 0.2
    
    # Sample Runner Configuration
    SAMPLE_COUNT: int = 10
    SEED: Optional[int] = None
    
    # Output Configuration
    LOG_FILE: str = "localdates.log"


# Default configuration instance
config = Config()

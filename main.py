"""
Sample runner for the localdates generators.

Builds a weighted date source from the command line and prints a batch
of generated dates, so a day window can be inspected before it is used
in a property-based test.
"""

import argparse
import logging
import random
from datetime import date
from typing import List, Optional, Sequence

from hypothesis.errors import InvalidArgument

from localdates.config import Config, config
from localdates.local_dates import LocalDates


logger = logging.getLogger(__name__)


def configure_logging(log_file: str) -> None:
    """Configure console and file logging for the runner."""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler(log_file, encoding='utf-8')  # File output
        ]
    )


class SampleRunner:
    """Draws a batch of dates from a weighted date source."""
    
    def __init__(self, cfg: Optional[Config] = None):
        """Initialize SampleRunner with configuration.
        
        Args:
            cfg: Configuration object. Uses default if not provided.
        """
        self.config = cfg or config
        self.local_dates = LocalDates(self.config)

    def run(
        self,
        days: Optional[int] = None,
        between: Optional[Sequence[int]] = None,
        count: Optional[int] = None,
        seed: Optional[int] = None
    ) -> List[date]:
        """Generate a batch of dates.
        
        Exactly one of ``days`` and ``between`` selects the source:
        ``days`` spans the epoch and that offset, ``between`` is a
        (start, end) pair of offsets.
        
        Args:
            days: Offset passed to LocalDates.with_days
            between: Offsets passed to LocalDates.with_days_between
            count: Number of dates to draw. Defaults to config.SAMPLE_COUNT
            seed: Seed for the Random. Defaults to config.SEED
            
        Returns:
            List of generated dates in draw order
            
        Raises:
            InvalidArgument: If the offsets are rejected, or neither or both
                of days and between are given
        """
        if (days is None) == (between is None):
            raise InvalidArgument("Exactly one of days and between must be given")
        
        if days is not None:
            source = self.local_dates.with_days(days)
            logger.info(f"Sampling dates between the epoch and {days} days from it")
        else:
            start, end = between
            source = self.local_dates.with_days_between(start, end)
            logger.info(f"Sampling dates between {start} and {end} days from the epoch")
        
        count = self.config.SAMPLE_COUNT if count is None else count
        seed = self.config.SEED if seed is None else seed
        logger.info(f"Drawing {count} dates (seed: {seed})")
        
        dates = source.sample(count, random.Random(seed))
        for value in dates:
            logger.debug(f"Generated date: {value.isoformat()}")
        
        logger.info(f"Distinct dates: {len(set(dates))} of {len(dates)}")
        return dates


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Sample dates from a weighted date source')
    window = parser.add_mutually_exclusive_group(required=True)
    window.add_argument('--days', type=int,
                        help='Offset from the epoch; dates span the epoch and this offset')
    window.add_argument('--between', type=int, nargs=2, metavar=('START', 'END'),
                        help='Start and end offsets from the epoch (inclusive)')
    parser.add_argument('--count', type=int, default=None,
                        help='Number of dates to draw')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible output')
    return parser


def run(argv: Optional[Sequence[str]] = None) -> List[date]:
    """Main entry point for the sample runner.
    
    Parses the command line, draws the dates and prints them one per line.
    
    Returns:
        List of generated dates
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    runner = SampleRunner()
    
    try:
        dates = runner.run(days=args.days, between=args.between, count=args.count, seed=args.seed)
    except InvalidArgument as e:
        parser.error(str(e))
    
    for value in dates:
        print(value.isoformat())
    return dates


if __name__ == "__main__":
    configure_logging(config.LOG_FILE)
    run()

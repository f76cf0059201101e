"""
Sources of generated values for property-based tests.

A Source turns draws from a ``random.Random`` into values. Sources are
immutable and hold no state between draws, so one Source can be sampled
repeatedly and from several threads, each with its own Random.

The integer range source is the primitive; mapped sources move its values
into another domain while remembering the way back, and weighted sources
mix a set of fixed values into another source's output.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from hypothesis import strategies as st

from localdates.arguments import check_arguments, is_integral


logger = logging.getLogger(__name__)


class Source:
    """Base class for value sources.
    
    Subclasses implement ``generate`` (one value per call, using only the
    Random passed in) and ``invert`` (map a produced value back to the
    integer it was drawn from).
    """
    
    def generate(self, rng: random.Random) -> Any:
        raise NotImplementedError
    
    def invert(self, value: Any) -> int:
        raise NotImplementedError
    
    def as_(self, forward: Callable[[Any], Any], backward: Callable[[Any], Any]) -> "MappedSource":
        """Map produced values into another domain.
        
        Args:
            forward: Converts a value of this source into the new domain
            backward: Converts a value of the new domain back; must undo forward
            
        Returns:
            A MappedSource wrapping this source
        """
        return MappedSource(self, forward, backward)
    
    def sample(self, count: int, rng: Optional[random.Random] = None) -> List[Any]:
        """Draw ``count`` values.
        
        Args:
            count: Number of values to draw
            rng: Random to draw from. A freshly seeded one is used if not provided.
            
        Returns:
            List of drawn values in draw order
        """
        check_arguments(
            is_integral(count) and count >= 0,
            "Number of values to draw must be a non-negative integer, got %r",
            count
        )
        rng = rng or random.Random()
        return [self.generate(rng) for _ in range(count)]
    
    def as_strategy(self) -> st.SearchStrategy:
        """Adapt this source to a hypothesis strategy usable with ``@given``.
        
        Draws come from hypothesis' own Random, so hypothesis controls
        replay and shrinking of the generated values.
        """
        return st.builds(self.generate, st.randoms(use_true_random=False))


@dataclass(frozen=True)
class IntegerRangeSource(Source):
    """Integers uniformly distributed over [lo, hi] (both inclusive)."""
    lo: int
    hi: int
    
    def generate(self, rng: random.Random) -> int:
        return rng.randint(self.lo, self.hi)
    
    def invert(self, value: int) -> int:
        return value


@dataclass(frozen=True)
class MappedSource(Source):
    """Values of a base source passed through a forward mapping.
    
    Attributes:
        base: Source the values are drawn from
        forward: Mapping applied to every drawn value
        backward: Inverse of forward, used to recover the base value
    """
    base: Source
    forward: Callable[[Any], Any]
    backward: Callable[[Any], Any]
    
    def generate(self, rng: random.Random) -> Any:
        return self.forward(self.base.generate(rng))
    
    def invert(self, value: Any) -> int:
        return self.base.invert(self.backward(value))


@dataclass(frozen=True)
class WeightedSource(Source):
    """A base source that sometimes emits one of a set of fixed values instead.
    
    Each draw first decides, with ``probability``, whether to emit one of
    ``values`` (picked uniformly) or to defer to ``base``. Anything the base
    can produce stays reachable with the same relative likelihood.
    
    Attributes:
        base: Source used for the ordinary draws
        values: Values emitted on weighted draws
        probability: Chance per draw of a weighted draw, 0 < probability < 1
    """
    base: Source
    values: Tuple[Any, ...]
    probability: float
    
    def generate(self, rng: random.Random) -> Any:
        # Low draws defer to base so hypothesis shrinks towards base values
        if rng.random() >= 1 - self.probability:
            return rng.choice(self.values)
        return self.base.generate(rng)
    
    def invert(self, value: Any) -> int:
        return self.base.invert(value)


def integer_range(lo: int, hi: int) -> IntegerRangeSource:
    """Create a source of integers uniformly distributed over [lo, hi].
    
    Raises:
        InvalidArgument: If lo is greater than hi
    """
    check_arguments(
        lo <= hi,
        "Cannot have the maximum (%s) smaller than the minimum (%s)",
        hi, lo
    )
    return IntegerRangeSource(lo, hi)


def weight_with_values(base: Source, value: Any, *values: Any, probability: float) -> WeightedSource:
    """Weight a source so the given values are likely to be produced.
    
    Args:
        base: Source providing the ordinary draws
        value: First value to favour
        *values: Further values to favour
        probability: Chance per draw that one of the favoured values is emitted
        
    Returns:
        WeightedSource mixing the favoured values into base
        
    Raises:
        InvalidArgument: If probability is not strictly between 0 and 1
    """
    check_arguments(
        0 < probability < 1,
        "Boundary probability must be strictly between 0 and 1, got %s",
        probability
    )
    weighted = (value,) + values
    logger.debug(f"Weighting {type(base).__name__} with {len(weighted)} value(s) at p={probability}")
    return WeightedSource(base, weighted, probability)

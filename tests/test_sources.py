"""
Tests for value sources.

Covers the integer range primitive, mapped sources and boundary
weighting, including the adaptation to hypothesis strategies.
"""

import random
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import find, given, strategies as st, settings
from hypothesis.errors import InvalidArgument

from localdates.date_utils import EPOCH
from localdates.local_dates import with_days, with_days_between

from localdates.sources import (
    IntegerRangeSource,
    MappedSource,
    WeightedSource,
    integer_range,
    weight_with_values,
)


@given(
    bounds=st.tuples(st.integers(-10**9, 10**9), st.integers(-10**9, 10**9)).map(sorted),
    seed=st.integers(min_value=0, max_value=2**32 - 1)
)
@settings(max_examples=100)
def test_integer_range_stays_in_bounds(bounds, seed):
    """
    **Feature: localdates, Property 5: integer range bounds**
    
    *For any* lo <= hi, every integer drawn from integer_range(lo, hi) SHALL
    lie within [lo, hi].
    """
    lo, hi = bounds
    source = integer_range(lo, hi)
    
    for value in source.sample(50, random.Random(seed)):
        assert lo <= value <= hi


@given(
    base_value=st.integers(-1000, 1000),
    seed=st.integers(min_value=0, max_value=2**32 - 1)
)
@settings(max_examples=100)
def test_mapped_source_inverts_to_base_value(base_value, seed):
    """
    **Feature: localdates, Property 6: mapped source inversion**
    
    *For any* value produced by a mapped source, invert SHALL return the
    integer the value was produced from.
    """
    source = integer_range(base_value, base_value + 10).as_(str, int)
    
    for value in source.sample(20, random.Random(seed)):
        assert isinstance(value, str)
        assert source.invert(value) == int(value)
        assert base_value <= source.invert(value) <= base_value + 10


class TestIntegerRange:
    """Unit tests for the integer range primitive."""
    
    def test_reversed_bounds_rejected(self):
        with pytest.raises(InvalidArgument):
            integer_range(5, 3)
    
    def test_single_point_range(self):
        assert integer_range(7, 7).sample(10, random.Random(0)) == [7] * 10
    
    def test_every_value_reachable(self):
        values = set(integer_range(0, 9).sample(1000, random.Random(1)))
        assert values == set(range(10))
    
    def test_invert_is_identity(self):
        assert integer_range(0, 9).invert(4) == 4
    
    def test_returns_range_source(self):
        assert integer_range(0, 1) == IntegerRangeSource(0, 1)


class TestSample:
    """Unit tests for Source.sample."""
    
    def test_same_seed_same_values(self):
        source = integer_range(-1000, 1000)
        assert source.sample(30, random.Random(3)) == source.sample(30, random.Random(3))
    
    def test_zero_count(self):
        assert integer_range(0, 1).sample(0) == []
    
    def test_negative_count_rejected(self):
        with pytest.raises(InvalidArgument):
            integer_range(0, 1).sample(-1)
    
    @pytest.mark.parametrize("count", [None, 2.5, "3", True])
    def test_non_integer_count_rejected(self, count):
        with pytest.raises(InvalidArgument):
            integer_range(0, 1).sample(count)
    
    def test_default_random(self):
        values = integer_range(0, 5).sample(20)
        assert len(values) == 20
        assert all(0 <= v <= 5 for v in values)


class TestWeighting:
    """Unit tests for boundary weighting."""
    
    def test_weighted_values_are_emitted(self):
        source = weight_with_values(integer_range(0, 10**9), -1, -2, probability=0.2)
        counts = Counter(source.sample(1000, random.Random(5)))
        assert counts[-1] > 0
        assert counts[-2] > 0
    
    def test_base_support_is_kept(self):
        source = weight_with_values(integer_range(0, 9), 100, probability=0.5)
        values = set(source.sample(2000, random.Random(11)))
        assert values == set(range(10)) | {100}
    
    def test_weighted_share_matches_probability(self):
        source = weight_with_values(integer_range(1, 10**12), 0, probability=0.2)
        draws = source.sample(5000, random.Random(13))
        share = draws.count(0) / len(draws)
        assert 0.15 < share < 0.25
    
    @pytest.mark.parametrize("probability", [0, 1, -0.1, 1.5])
    def test_probability_out_of_range_rejected(self, probability):
        with pytest.raises(InvalidArgument):
            weight_with_values(integer_range(0, 1), 0, probability=probability)
    
    def test_invert_delegates_to_base(self):
        base = integer_range(0, 9).as_(lambda i: i * 2, lambda i: i // 2)
        source = weight_with_values(base, 18, probability=0.3)
        assert source.invert(18) == 9
    
    def test_weighted_source_is_a_composite(self):
        base = integer_range(0, 9)
        source = weight_with_values(base, 3, 4, probability=0.3)
        assert isinstance(source, WeightedSource)
        assert source.base is base
        assert source.values == (3, 4)
    
    def test_weighted_source_is_immutable(self):
        source = weight_with_values(integer_range(0, 9), 3, probability=0.3)
        with pytest.raises(AttributeError):
            source.probability = 0.9
    
    def test_sampling_does_not_change_source(self):
        source = weight_with_values(integer_range(0, 9), 3, probability=0.3)
        first = source.sample(100, random.Random(2))
        source.sample(500, random.Random(99))
        assert source.sample(100, random.Random(2)) == first


def test_concurrent_sampling_is_independent():
    """Threads sampling one source with equally seeded Randoms see the same values."""
    source = weight_with_values(
        integer_range(-10**6, 10**6).as_(str, int), "-1000000", "1000000", probability=0.2
    )
    
    def draw(seed):
        return source.sample(500, random.Random(seed))
    
    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(draw, [17] * 8))
    
    assert all(result == results[0] for result in results)


@given(st.data())
@settings(max_examples=50)
def test_as_strategy_draws_within_source(data):
    """
    **Feature: localdates, Property 7: hypothesis adaptation**
    
    *For any* draw made by hypothesis through as_strategy, the value SHALL
    be one the source itself can produce.
    """
    source = weight_with_values(integer_range(-50, 50), 1000, probability=0.2)
    value = data.draw(source.as_strategy())
    assert -50 <= value <= 50 or value == 1000


def test_mapped_source_type():
    assert isinstance(integer_range(0, 1).as_(str, int), MappedSource)


class TestShrinking:
    """Hypothesis shrinks weighted date sources towards the epoch."""
    
    def test_with_days_shrinks_to_epoch(self):
        assert find(with_days(10).as_strategy(), lambda d: True) == EPOCH
    
    def test_with_negative_days_shrinks_to_epoch(self):
        assert find(with_days(-10).as_strategy(), lambda d: True) == EPOCH
    
    def test_with_days_between_shrinks_to_epoch(self):
        assert find(with_days_between(-5, 5).as_strategy(), lambda d: True) == EPOCH
    
    def test_weighted_draw_kept_when_required(self):
        source = weight_with_values(integer_range(0, 10**9), -1, probability=0.2)
        assert find(source.as_strategy(), lambda v: v < 0) == -1

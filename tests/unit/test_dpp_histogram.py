"""
Unit tests for the fixed-boundary integer histogram.
"""

import pytest

from dpp_metrics import IntHistogram, MetricsConfigError


class TestIntHistogram:
    """Test bucket placement and export."""

    def test_empty_histogram(self):
        """Empty histogram has no buckets."""
        h = IntHistogram((1, 10, 25, 39))
        assert h.num_buckets == 5
        assert h.num_non_empty_buckets() == 0
        assert h.buckets() == []
        assert str(h) == "{}"

    @pytest.mark.parametrize(
        "value,index",
        [(-3, 0), (0, 0), (1, 1), (9, 1), (10, 2), (24, 2), (25, 3), (38, 3), (39, 4), (1000, 4)],
    )
    def test_bucket_index(self, value, index):
        """Boundaries are inclusive on the lower side."""
        assert IntHistogram((1, 10, 25, 39)).bucket_index(value) == index

    def test_bucket_bounds(self):
        """First bucket starts at zero; last is open-ended."""
        h = IntHistogram((1, 10, 25, 39))
        assert (h.bucket_start(0), h.bucket_end(0)) == (0, 1)
        assert (h.bucket_start(2), h.bucket_end(2)) == (10, 25)
        assert (h.bucket_start(4), h.bucket_end(4)) == (39, None)

    def test_increment_and_count(self):
        """Counts accumulate per bucket."""
        h = IntHistogram((1, 10))
        h.increment(2)
        h.increment(5)
        h.increment(50, count=3)

        assert h.count(7) == 2
        assert h.count(11) == 3
        assert h.count(0) == 0
        assert h.num_non_empty_buckets() == 2
        assert str(h) == "{[1,10)=2, [10,inf)=3}"

    def test_buckets_sorted(self):
        """Exported buckets are in ascending order regardless of insert order."""
        h = IntHistogram((1, 10, 25, 39))
        h.increment(100)
        h.increment(0)
        h.increment(12)

        assert [b.start for b in h.buckets()] == [0, 10, 39]

    def test_clear(self):
        """Clear removes all buckets."""
        h = IntHistogram((1, 10))
        h.increment(3)
        h.clear()
        assert h.buckets() == []

    @pytest.mark.parametrize("boundaries", [(), (0, 5), (10, 5), (1, 1), (-1, 2)])
    def test_invalid_boundaries(self, boundaries):
        """Boundaries must be positive and strictly ascending."""
        with pytest.raises(MetricsConfigError):
            IntHistogram(boundaries)

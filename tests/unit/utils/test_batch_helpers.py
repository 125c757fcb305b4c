"""
Module: test_batch_helpers.py
Description: Unit tests for batch slicing helpers.
"""

import pytest

from sqs_producer.utils.batch_helpers import iter_batches, validate_batch_size


class TestIterBatches:
    """Test cases for iter_batches."""

    def test_slices_with_offsets(self):
        assert list(iter_batches([1, 2, 3, 4, 5], 2)) == [(0, [1, 2]), (2, [3, 4]), (4, [5])]

    def test_exact_multiple(self):
        assert list(iter_batches(list(range(6)), 3)) == [(0, [0, 1, 2]), (3, [3, 4, 5])]

    def test_empty_input(self):
        assert list(iter_batches([], 10)) == []

    def test_lazy(self):
        batches = iter_batches(list(range(100)), 10)

        assert next(batches) == (0, list(range(10)))

    @pytest.mark.parametrize("batch_size", [0, -3])
    def test_invalid_batch_size(self, batch_size):
        with pytest.raises(ValueError, match="batch_size must be positive"):
            list(iter_batches([1], batch_size))


class TestValidateBatchSize:
    """Test cases for validate_batch_size."""

    def test_within_limit(self):
        validate_batch_size(list(range(10)))

    def test_too_large(self):
        with pytest.raises(ValueError, match="cannot exceed 10"):
            validate_batch_size(list(range(11)))

    def test_custom_limit(self):
        with pytest.raises(ValueError, match="cannot exceed 2"):
            validate_batch_size([1, 2, 3], max_size=2)

    def test_empty(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_batch_size([])

    def test_not_a_list(self):
        with pytest.raises(ValueError, match="items must be a list"):
            validate_batch_size((1, 2))

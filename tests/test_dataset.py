"""Tests for GridDataset construction, validation and cell lookup."""

import math

import numpy as np
import pytest

from pygridapprox import (
    DuplicateArgumentError,
    GridDataset,
    InsufficientDataError,
    OutOfDomainError,
    Sample,
)
from pygridapprox._indexer import find_cell, find_cells


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_sorts_by_argument(self):
        """Unordered input ends up strictly increasing in x."""
        ds = GridDataset([(3.0, 1.0), (1.0, 2.0), (2.0, 3.0)])
        assert [p.x for p in ds] == [1.0, 2.0, 3.0]
        assert [p.y for p in ds] == [2.0, 3.0, 1.0]

    def test_bounds(self):
        ds = GridDataset([(3.0, 1.0), (-1.5, 2.0), (2.0, 3.0)])
        assert ds.left_bound == -1.5
        assert ds.right_bound == 3.0

    def test_exact_duplicates_merged(self):
        """[(1,5),(1,5),(2,9)] gives [(1,5),(2,9)]."""
        ds = GridDataset([(1, 5), (1, 5), (2, 9)])
        assert ds.to_list() == [Sample(1.0, 5.0), Sample(2.0, 9.0)]

    def test_conflicting_duplicate_raises(self):
        """[(1,5),(1,6)] is rejected and the error names x=1."""
        with pytest.raises(DuplicateArgumentError, match="x=1.0") as exc_info:
            GridDataset([(1, 5), (1, 6)])
        assert exc_info.value.x == 1.0

    def test_duplicate_error_is_value_error(self):
        with pytest.raises(ValueError):
            GridDataset([(0, 0), (1, 5), (1, 6)])

    def test_size_equals_distinct_arguments(self):
        """Random multiset with repeats: size equals number of distinct x."""
        rng = np.random.default_rng(3)
        xs = rng.integers(0, 20, size=200).astype(float)
        samples = [(x, x * x) for x in xs]
        ds = GridDataset(samples)
        assert len(ds) == len(set(xs.tolist()))
        assert np.all(np.diff(ds.xs) > 0)

    def test_accepts_array(self):
        arr = np.array([[2.0, 4.0], [0.0, 0.0], [1.0, 1.0]])
        ds = GridDataset(arr)
        np.testing.assert_array_equal(ds.xs, [0.0, 1.0, 2.0])
        np.testing.assert_array_equal(ds.ys, [0.0, 1.0, 4.0])

    def test_bad_array_shape_raises(self):
        with pytest.raises(ValueError, match="shape"):
            GridDataset(np.zeros((3, 3)))

    def test_accepts_generator(self):
        ds = GridDataset((x, 2 * x) for x in range(5))
        assert len(ds) == 5

    def test_empty_raises(self):
        with pytest.raises(InsufficientDataError):
            GridDataset([])

    def test_nan_raises(self):
        with pytest.raises(ValueError, match="NaN"):
            GridDataset([(0.0, 1.0), (math.nan, 2.0)])

    def test_single_sample(self):
        """One sample is a valid (degenerate) grid with no cells."""
        ds = GridDataset([(2.0, 3.0)])
        assert ds.left_bound == ds.right_bound == 2.0
        assert ds.num_cells == 0

    def test_trusted_path_verbatim(self):
        """validate=False keeps the input as given."""
        samples = [(0.0, 1.0), (1.0, 2.0), (5.0, 0.0)]
        ds = GridDataset(samples, validate=False)
        assert ds.to_list() == [Sample(*p) for p in samples]

    def test_trusted_path_skips_checks(self):
        """The trusted path does not detect conflicting duplicates."""
        ds = GridDataset([(1.0, 5.0), (1.0, 6.0)], validate=False)
        assert len(ds) == 2

    def test_arrays_read_only(self):
        ds = GridDataset([(0, 0), (1, 1)])
        with pytest.raises(ValueError):
            ds.xs[0] = 5.0

    def test_to_list_is_copy(self):
        ds = GridDataset([(0, 0), (1, 1)])
        copy = ds.to_list()
        copy.append(Sample(2.0, 2.0))
        copy[0] = Sample(-1.0, 0.0)
        assert len(ds) == 2
        assert ds[0] == Sample(0.0, 0.0)

    def test_equality(self):
        assert GridDataset([(1, 2), (0, 0)]) == GridDataset([(0, 0), (1, 2)])
        assert GridDataset([(0, 0), (1, 2)]) != GridDataset([(0, 0), (1, 3)])


# ---------------------------------------------------------------------------
# Cell lookup
# ---------------------------------------------------------------------------

class TestGetIndex:
    @pytest.fixture
    def dataset(self):
        return GridDataset([(0.0, 0.0), (0.5, 1.0), (2.0, 1.0), (2.1, 0.0), (7.0, 3.0)])

    def test_nodes_map_to_cell_starting_there(self, dataset):
        for i in range(len(dataset) - 1):
            assert dataset.get_index(dataset.xs[i]) == i

    def test_right_bound_maps_to_last_cell(self, dataset):
        assert dataset.get_index(7.0) == len(dataset) - 2

    def test_inside_cells(self, dataset):
        assert dataset.get_index(0.25) == 0
        assert dataset.get_index(1.999) == 1
        assert dataset.get_index(2.05) == 2
        assert dataset.get_index(6.9) == 3

    def test_random_arguments(self):
        """Random x in [left, right): xs[i] <= x < xs[i+1]."""
        rng = np.random.default_rng(11)
        ds = GridDataset((float(x), 0.0) for x in rng.uniform(-5, 5, 60))
        xs = ds.xs
        for x in rng.uniform(ds.left_bound, ds.right_bound, 500):
            i = ds.get_index(x)
            assert xs[i] <= x < xs[i + 1]

    def test_below_left_bound_raises(self, dataset):
        with pytest.raises(OutOfDomainError, match=r"\[0.0, 7.0\]") as exc_info:
            dataset.get_index(-1e-12)
        assert exc_info.value.x == -1e-12
        assert exc_info.value.left_bound == 0.0
        assert exc_info.value.right_bound == 7.0

    def test_above_right_bound_raises(self, dataset):
        with pytest.raises(OutOfDomainError):
            dataset.get_index(7.0 + 1e-9)

    def test_nan_raises(self, dataset):
        with pytest.raises(OutOfDomainError):
            dataset.get_index(math.nan)

    def test_two_nodes(self):
        ds = GridDataset([(1.0, 0.0), (2.0, 0.0)])
        assert ds.get_index(1.0) == 0
        assert ds.get_index(1.5) == 0
        assert ds.get_index(2.0) == 0

    def test_single_sample_has_no_cells(self):
        ds = GridDataset([(2.0, 3.0)])
        with pytest.raises(InsufficientDataError):
            ds.get_index(2.0)


class TestBatchIndex:
    def test_matches_scalar_search(self):
        """np.searchsorted lookup agrees with the binary search."""
        rng = np.random.default_rng(5)
        xs = np.sort(rng.uniform(0, 10, 40))
        queries = np.concatenate([xs, rng.uniform(xs[0], xs[-1], 300)])
        batch = find_cells(xs, queries)
        scalar = [find_cell(xs, q) for q in queries]
        np.testing.assert_array_equal(batch, scalar)

    def test_get_indices_out_of_domain(self):
        ds = GridDataset([(0, 0), (1, 1), (2, 0)])
        with pytest.raises(OutOfDomainError, match="x=3.0"):
            ds.get_indices(np.array([0.5, 3.0]))

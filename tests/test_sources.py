import numpy as np
import pandas as pd
import pytest
from scipy import sparse

from branchflow import ExperimentLineages, LineageResult, LineageSource, as_lineage_source, branch_id


class CountingSource(LineageSource):
    """Source that records when its weights are read."""

    def __init__(self, weights):
        self._weights = pd.DataFrame(weights)
        self.reads = []

    def weights(self):
        self.reads.append('weights')
        return self._weights

    def lineage_names(self):
        self.reads.append('names')
        return [str(k) for k in self._weights.columns]


class TestLineageResult:

    def test_default_lineage_names(self):
        source = LineageResult(np.full((2, 3), 0.5))
        assert source.lineage_names() == ["Lineage1", "Lineage2", "Lineage3"]
        assert source.lineage_count() == 3

    def test_dataframe_columns_are_names(self):
        W = pd.DataFrame([[0.2, 0.8]], index=["cellA"], columns=["erythroid", "myeloid"])
        source = LineageResult(W)
        assert source.lineage_names() == ["erythroid", "myeloid"]
        assert list(source.weights().index) == ["cellA"]

    def test_explicit_names_override(self):
        source = LineageResult(np.zeros((1, 2)), lineage_names=["a", "b"])
        assert list(source.weights().columns) == ["a", "b"]

    def test_wrong_number_of_names(self):
        with pytest.raises(ValueError):
            LineageResult(np.zeros((1, 2)), lineage_names=["a"])

    def test_weights_are_copied(self):
        W = np.array([[0.2, 0.8]])
        source = LineageResult(W)
        W[0, 0] = 1.
        assert source.weights().iloc[0, 0] == 0.2

    def test_sparse(self):
        source = LineageResult(sparse.csr_matrix(np.eye(3)))
        np.testing.assert_array_equal(source.weights().values, np.eye(3))


class TestExperimentLineages:

    def test_names_from_uns(self, three_lineage_weights, experiment_factory):
        source = ExperimentLineages(experiment_factory(three_lineage_weights, lineage_names=["x", "y", "z"]))
        assert source.lineage_count() == 3
        assert list(source.weights().columns) == ["x", "y", "z"]

    def test_names_from_dataframe(self, experiment_factory):
        W = pd.DataFrame([[0.1, 0.9]], columns=["p", "q"])
        source = ExperimentLineages(experiment_factory(W))
        assert source.lineage_names() == ["p", "q"]

    def test_cell_names(self, three_lineage_weights, experiment_factory):
        cells = list("abcdef")
        source = ExperimentLineages(experiment_factory(three_lineage_weights, obs_names=cells))
        assert list(source.weights().index) == cells

    def test_custom_key(self, three_lineage_weights, experiment_factory):
        experiment = experiment_factory(three_lineage_weights, key="branch_probs")
        assert ExperimentLineages(experiment, key="branch_probs").lineage_count() == 3

    def test_missing_key(self, three_lineage_weights, experiment_factory):
        with pytest.raises(KeyError):
            ExperimentLineages(experiment_factory(three_lineage_weights), key="missing")


class TestAsLineageSource:

    def test_dispatch(self, three_lineage_weights, experiment_factory):
        assert isinstance(as_lineage_source(three_lineage_weights), LineageResult)
        assert isinstance(as_lineage_source(pd.DataFrame(three_lineage_weights)), LineageResult)
        assert isinstance(as_lineage_source(sparse.csr_matrix(three_lineage_weights)), LineageResult)
        assert isinstance(as_lineage_source(experiment_factory(three_lineage_weights)), ExperimentLineages)

    def test_source_is_returned_as_is(self, three_lineage_weights):
        source = LineageResult(three_lineage_weights)
        assert as_lineage_source(source) is source

    def test_unrecognized_type(self):
        with pytest.raises(TypeError):
            as_lineage_source([[0.1, 0.9]])

    def test_lineage_count_is_queried_before_weights(self, three_lineage_weights):
        source = CountingSource(three_lineage_weights)
        labels = branch_id(source)
        assert source.reads == ['names', 'weights']
        assert list(labels) == ["1", "2", "1,2", "1,2", "1,2,3", ""]

"""Shared fixtures for the branchflow test suite."""

import os
import sys

# Ensure the package root is importable without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


import numpy as np
import pandas as pd
import pytest


class FakeExperiment:
    """Minimal AnnData-like container: ``obsm``, ``uns`` and ``obs_names``."""

    def __init__(self, weights, lineage_names=None, obs_names=None, key='lineage_weights'):
        self.obsm = {key: weights}
        self.uns = {} if lineage_names is None else {'lineage_names': list(lineage_names)}
        if obs_names is not None:
            self.obs_names = pd.Index(obs_names)


@pytest.fixture
def three_lineage_weights():
    """Six cells on three lineages, default thresh = 1/3."""
    return np.array([
        [0.90, 0.05, 0.05],   # "1"
        [0.10, 0.80, 0.10],   # "2"
        [0.50, 0.45, 0.05],   # "1,2"
        [0.60, 0.40, 0.00],   # "1,2"
        [0.40, 0.40, 0.40],   # "1,2,3"
        [0.20, 0.20, 0.20],   # ""
    ])


@pytest.fixture
def random_weights():
    rng = np.random.default_rng(0)
    return rng.uniform(0., 1., size=(200, 4))


@pytest.fixture
def experiment_factory():
    return FakeExperiment

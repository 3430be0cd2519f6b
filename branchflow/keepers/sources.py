"""
sources
=======

Adapters that expose lineage weights from upstream trajectory-fitting
results through one interface, regardless of how the result is stored.
"""

from abc import ABC, abstractmethod

import numpy as np
import pandas as pd
from scipy.sparse import issparse

from ..checks import check_weight_matrix
from .._logging import _gen_logger

logger = _gen_logger(__name__)

DEFAULT_WEIGHTS_KEY = 'lineage_weights'
DEFAULT_NAMES_KEY = 'lineage_names'


def _default_lineage_names(n_lineages):
    return [f"Lineage{ix}" for ix in range(1, n_lineages + 1)]


def _to_frame(weights, lineage_names=None, cell_names=None):
    """ Convert weights to a `pandas.DataFrame` of size (num_cells, num_lineages).

    Parameters
    ----------
    weights : {`numpy.ndarray`, `pandas.DataFrame`, `scipy.sparse.spmatrix`}
        The lineage weights.
    lineage_names : `list` [`str`], optional
        Column labels. If `None`, the dataframe columns are kept, otherwise
        ``Lineage1, ..., LineageL`` is used.
    cell_names : `list` [`str`], optional
        Row labels. If `None`, the dataframe index is kept, otherwise
        rows are labeled ``0, ..., num_cells - 1``.

    Returns
    -------
    W : `pandas.DataFrame`
        A copy of the weights.
    """
    if isinstance(weights, pd.DataFrame):
        W = weights.copy()
    else:
        if issparse(weights):
            weights = weights.toarray()
        weights = np.array(weights, dtype=float, copy=True)
        check_weight_matrix(weights)
        W = pd.DataFrame(weights)

    check_weight_matrix(W.values)

    if lineage_names is not None:
        if len(lineage_names) != W.shape[1]:
            raise ValueError(f"Expected {W.shape[1]} lineage names, got {len(lineage_names)}.")
        W.columns = list(lineage_names)
    elif not isinstance(weights, pd.DataFrame):
        W.columns = _default_lineage_names(W.shape[1])

    if cell_names is not None:
        W.index = list(cell_names)
    return W


class LineageSource(ABC):
    """ Capability interface for objects that provide lineage weights.

    Anything downstream of the trajectory fit only needs the weight matrix
    and the number of lineages, so the concrete container does not matter.
    """

    @abstractmethod
    def weights(self):
        """ Lineage weights, `pandas.DataFrame` of size (num_cells, num_lineages). """

    @abstractmethod
    def lineage_names(self):
        """ Lineage names, `list` [`str`] of length num_lineages. """

    def lineage_count(self):
        """ Number of lineages. """
        return len(self.lineage_names())


class LineageResult(LineageSource):
    """ Raw trajectory-fitting result holding the weight matrix directly.

    Parameters
    ----------
    weights : {`numpy.ndarray`, `pandas.DataFrame`, `scipy.sparse.spmatrix`}
        Lineage weights of size (num_cells, num_lineages). If a dataframe,
        the index gives cell names and the columns lineage names.
    lineage_names : `list` [`str`], optional
        Lineage names, overrides dataframe columns.
    """

    def __init__(self, weights, lineage_names=None):
        self._weights = _to_frame(weights, lineage_names=lineage_names)
        self._lineage_names = [str(k) for k in self._weights.columns]

    def __repr__(self):
        n_cells, n_lineages = self._weights.shape
        return f"{self.__class__.__name__}(n_cells={n_cells}, n_lineages={n_lineages})"

    def weights(self):
        return self._weights

    def lineage_names(self):
        return list(self._lineage_names)


class ExperimentLineages(LineageSource):
    """ Lineage weights stored in an AnnData-like experiment container.

    The container is expected to store the weights of size
    (num_cells, num_lineages) in ``experiment.obsm[key]``. Lineage names are
    read from ``experiment.uns[names_key]`` when present, then from the
    columns of the stored weights if they are a dataframe.

    Parameters
    ----------
    experiment : AnnData-like
        Object with an ``obsm`` mapping and optionally ``uns`` and ``obs_names``.
    key : `str`
        Key of the weights in ``experiment.obsm``.
    names_key : `str`
        Key of the lineage names in ``experiment.uns``.
    """

    def __init__(self, experiment, key=DEFAULT_WEIGHTS_KEY, names_key=DEFAULT_NAMES_KEY):
        if key not in experiment.obsm:
            raise KeyError(f"Lineage weights not found in experiment.obsm[{key!r}].")
        self.experiment = experiment
        self.key = key
        self.names_key = names_key

    def __repr__(self):
        return f"{self.__class__.__name__}(key={self.key!r}, n_lineages={self.lineage_count()})"

    def _stored(self):
        return self.experiment.obsm[self.key]

    def lineage_names(self):
        uns = getattr(self.experiment, 'uns', None) or {}
        if self.names_key in uns:
            return [str(k) for k in uns[self.names_key]]
        stored = self._stored()
        if isinstance(stored, pd.DataFrame):
            return [str(k) for k in stored.columns]
        return _default_lineage_names(stored.shape[1])

    def lineage_count(self):
        # only the shape is needed, avoids densifying sparse weights
        uns = getattr(self.experiment, 'uns', None) or {}
        if self.names_key in uns:
            return len(uns[self.names_key])
        return self._stored().shape[1]

    def weights(self):
        cell_names = getattr(self.experiment, 'obs_names', None)
        if cell_names is not None:
            cell_names = list(cell_names)
        return _to_frame(self._stored(), lineage_names=self.lineage_names(),
                         cell_names=cell_names)


def as_lineage_source(x, key=DEFAULT_WEIGHTS_KEY, names_key=DEFAULT_NAMES_KEY):
    """ Wrap ``x`` in the matching `LineageSource` adapter.

    Parameters
    ----------
    x : {`LineageSource`, AnnData-like, `numpy.ndarray`, `pandas.DataFrame`, `scipy.sparse.spmatrix`}
        Object holding the lineage weights.

        - `LineageSource` : returned as is.
        - object with an ``obsm`` attribute : wrapped in `ExperimentLineages`.
        - matrix : wrapped in `LineageResult`.
    key : `str`
        Passed to `ExperimentLineages`.
    names_key : `str`
        Passed to `ExperimentLineages`.

    Returns
    -------
    source : `LineageSource`
    """
    if isinstance(x, LineageSource):
        source = x
    elif hasattr(x, 'obsm'):
        source = ExperimentLineages(x, key=key, names_key=names_key)
    elif isinstance(x, (np.ndarray, pd.DataFrame)) or issparse(x):
        source = LineageResult(x)
    else:
        raise TypeError(f"Unrecognized type {type(x).__name__} for lineage weights, must be one of "
                        "[LineageSource, AnnData-like, numpy.ndarray, pandas.DataFrame, scipy.sparse matrix].")
    logger.debug(f"Using {source!r} as lineage source.")
    return source

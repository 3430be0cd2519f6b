"""
labels
======

**Description**

Assign each cell to the lineage, or combination of lineages, it belongs to
by thresholding its lineage weights.

A cell's label is the set of lineages whose weight is strictly greater
than the threshold, serialized as the ascending, comma-joined 1-based
lineage indices (e.g. "1,3"). Cells with no lineage above the threshold
are labeled with the empty string.
"""

import numpy as np
import pandas as pd

from .._utils import _docstring_parameter, _desc_thresh, _desc_source, \
    join_indices, split_label
from ..checks import check_threshold, check_weight_matrix
from ..keepers.sources import as_lineage_source, _to_frame
from .._logging import _gen_logger

logger = _gen_logger(__name__)

LABELS_NAME = 'branch_id'


class LineageSet(frozenset):
    """ Immutable set of 1-based lineage indices.

    The canonical string form (``label``) is only used at the output
    boundary, all set operations are done on the indices.

    Examples
    --------
    >>> LineageSet.from_label("3,1").label
    '1,3'
    >>> LineageSet([1, 2]) < LineageSet.from_label("1,2,3")
    True
    """

    def __repr__(self):
        return f"LineageSet({self.label!r})"

    @classmethod
    def from_label(cls, label):
        """ Parse a comma-joined label, e.g. "1,2". """
        return cls(split_label(label))

    @classmethod
    def from_indices(cls, indices):
        return cls(int(ix) for ix in indices)

    @classmethod
    def coerce(cls, value):
        """ Return ``value`` as a `LineageSet`.

        Parameters
        ----------
        value : {`LineageSet`, `str`, Iterable(`int`)}
            A lineage set, a label string or lineage indices.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_label(value)
        return cls.from_indices(value)

    @property
    def label(self):
        """ Canonical label: ascending indices joined by ','. """
        return join_indices(self)

    @property
    def n_lineages(self):
        return len(self)

    def sort_key(self):
        """ Order by number of lineages, then by the sorted indices. """
        return (len(self), tuple(sorted(self)))


def sort_labels(labels):
    """ Sort label strings by number of lineages, then by lineage indices. """
    return sorted(labels, key=lambda k: LineageSet.from_label(k).sort_key())


@_docstring_parameter(thresh=_desc_thresh)
def assign_labels(weights, thresh=None):
    """\
    Assign each cell to a lineage or set of lineages.

    Parameters
    ----------
    weights : {{`numpy.ndarray`, `pandas.DataFrame`, `scipy.sparse.spmatrix`}}
        Lineage weights of size (num_cells, num_lineages). If a dataframe,
        the index is kept as the index of the returned labels.
    {thresh}

    Returns
    -------
    labels : `pandas.Series`
        Categorical labels, one per cell in the order of the rows in
        ``weights``. The categories are the distinct labels, ordered by
        number of lineages.
    """
    if thresh is not None:
        check_threshold(thresh)

    W = _to_frame(weights)
    n_lineages = W.shape[1]
    if thresh is None:
        thresh = 1. / n_lineages
    return _threshold_labels(W, thresh)


def _threshold_labels(W, thresh):
    thresh = float(thresh)
    check_weight_matrix(W.values)
    above = W.values > thresh  # strict, weights equal to thresh are excluded

    # one label per distinct above-threshold pattern, mapped back to the rows
    lineage_ix = np.arange(1, W.shape[1] + 1)
    patterns, inverse = np.unique(above, axis=0, return_inverse=True)
    pattern_labels = np.array([join_indices(lineage_ix[p]) for p in patterns], dtype=object)
    values = pattern_labels[np.asarray(inverse).reshape(-1)]
    categories = sort_labels(pattern_labels)

    labels = pd.Series(pd.Categorical(values, categories=categories),
                       index=W.index, name=LABELS_NAME)
    logger.debug(f"Assigned {W.shape[0]} cells to {len(categories)} label(s) with thresh = {thresh:.4g}.")
    return labels


@_docstring_parameter(x=_desc_source, thresh=_desc_thresh)
def branch_id(x, thresh=None):
    """\
    Extract lineage assignments from a trajectory fit.

    Produces a categorical variable indicating which lineage (or
    combination of lineages) each cell is assigned to.

    Parameters
    ----------
    {x}
    {thresh}

    Returns
    -------
    labels : `pandas.Series`
        Categorical labels, one per cell, see :func:`assign_labels`.
    """
    if thresh is not None:
        check_threshold(thresh)

    source = as_lineage_source(x)
    n_lineages = source.lineage_count()
    if n_lineages < 1:
        raise ValueError("At least one lineage is required.")
    if thresh is None:
        thresh = 1. / n_lineages
    return _threshold_labels(source.weights(), thresh)


def label_counts(labels):
    """ Number of cells with each label.

    Parameters
    ----------
    labels : {`pandas.Series`, Iterable(`str`)}
        Labels as returned by :func:`assign_labels`.

    Returns
    -------
    counts : `pandas.Series`
        Counts indexed by label. For categorical labels all categories are
        included (possibly with count 0) in category order, otherwise labels
        are ordered by number of lineages.
    """
    if isinstance(labels, pd.Categorical):
        labels = pd.Series(labels)
    elif not isinstance(labels, pd.Series):
        labels = pd.Series(list(labels), dtype=object)
    if isinstance(labels.dtype, pd.CategoricalDtype):
        categories = list(labels.cat.categories)
    else:
        categories = sort_labels(labels.unique())
    counts = labels.astype(object).value_counts(sort=False).reindex(categories, fill_value=0).astype(int)
    counts.index = pd.Index([str(k) for k in categories], dtype=object)
    counts.name = 'cells'
    return counts

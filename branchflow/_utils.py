from textwrap import dedent

LABEL_DELIM = ','
DEFAULT_MAX_NODE_SIZE = 100


def _docstring_parameter(**kwds):
    """\
    Docstrings should start with "\" in the first line for proper formatting.
    """
    def dec(obj):
        obj.__orig_doc__ = obj.__doc__
        obj.__doc__ = dedent(obj.__doc__).format_map(kwds)
        return obj
    return dec


_desc_thresh = """\
thresh : {`float`, `None`}
    Weight threshold for assigning cells to lineages, ``0 <= thresh <= 1``.
    A cell's weight on a lineage must be strictly greater than ``thresh``
    for the lineage to be included in its label.
    If `None`, ``1 / L`` is used for ``L`` lineages.\
"""

_desc_max_node_size = """\
max_node_size : `float`
    The ``size`` of the largest node in the graph, all other nodes are
    scaled proportionally to their number of cells. (Default = 100)\
"""

_desc_source = """\
x : {`branchflow.keepers.LineageSource`, `numpy.ndarray`, `pandas.DataFrame`, AnnData-like}
    Object holding the lineage weights of size (num_cells, num_lineages).
    See :func:`branchflow.keepers.as_lineage_source` for accepted types.\
"""


def join_indices(indices, delim=None):
    """ Return the canonical label of a collection of lineage indices.

    Parameters
    ----------
    indices : Iterable(`int`)
        Lineage indices, duplicates are ignored.
    delim : `str`
        The delimiter, default = ','.

    Returns
    -------
    label : `str`
        Indices in ascending order joined by ``delim``, empty string if
        ``indices`` is empty.
    """
    if delim is None:
        delim = LABEL_DELIM
    return delim.join(str(ix) for ix in sorted(set(indices)))


def split_label(label, delim=None):
    """ Parse a label back into its lineage indices.

    Parameters
    ----------
    label : `str`
        Delimiter-joined lineage indices, e.g. "1,3". The empty string
        is the label with no lineages.
    delim : `str`
        The delimiter, default = ','.

    Returns
    -------
    indices : `list` [`int`]
        The lineage indices in the order they appear.
    """
    if delim is None:
        delim = LABEL_DELIM
    if not isinstance(label, str):
        raise ValueError(f"Label must be a string, got {type(label).__name__}.")
    if label == '':
        return []
    try:
        indices = [int(k) for k in label.split(delim)]
    except ValueError:
        raise ValueError(f"Malformed label {label!r}, expected {delim!r}-joined integers.") from None
    if any(ix < 1 for ix in indices):
        raise ValueError(f"Malformed label {label!r}, lineage indices start at 1.")
    return indices

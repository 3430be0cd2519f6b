import networkx as nx
import numpy as np

from ._utils import split_label


class InvalidParameter(ValueError):
    """ Raised when a user-facing parameter is outside its allowed range. """


def check_threshold(thresh):
    """ Raises InvalidParameter if ``thresh`` is not a number in [0, 1]. """
    try:
        ok = 0. <= float(thresh) <= 1.
    except (TypeError, ValueError):
        ok = False
    if not ok:  # also catches nan
        raise InvalidParameter("thresh must be between 0 and 1")


def check_max_node_size(max_node_size):
    """ Raises InvalidParameter if ``max_node_size`` is not a positive, finite number. """
    try:
        ok = np.isfinite(float(max_node_size)) and float(max_node_size) > 0
    except (TypeError, ValueError):
        ok = False
    if not ok:
        raise InvalidParameter("max_node_size must be a positive number")


def check_weight_matrix(W):
    """ Raises ValueError if the weight matrix has no cells or no lineages.

    Parameters
    ----------
    W : `numpy.ndarray`
        Weight matrix of size (num_cells, num_lineages).
    """
    if W.ndim != 2:
        raise ValueError(f"Weight matrix must be 2-dimensional, found {W.ndim} dimension(s).")
    if W.shape[1] == 0:
        raise ValueError("Weight matrix must have at least one lineage (column).")
    if W.shape[0] == 0:
        raise ValueError("Weight matrix must have at least one cell (row).")


def check_dag(G):
    """ Raises an AssertionError if the graph has a directed cycle. """
    assert nx.is_directed_acyclic_graph(G), "The branch graph must be acyclic."


def check_edges_extend(G):
    """ Raises an AssertionError if an edge does not point to a strict superset of its source. """
    for u, v in G.edges():
        assert set(split_label(u)) < set(split_label(v)), \
            f"Edge ({u!r}, {v!r}) must point to a label-set that strictly contains its source."


def check_edges_in_graph(G, edges):
    """ Raises AssertionError if not all edges are in the graph. """
    assert all([edge in G.edges() for edge in edges]), "All edges must be in the graph."

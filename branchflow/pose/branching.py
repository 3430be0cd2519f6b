"""
branching
=========

**Description**

Build the graph describing the relationships between the branch
assignments of cells.

Nodes are the distinct labels (sets of lineages) cells were assigned to.
An edge ``(n, d)`` indicates that the lineage set ``d`` directly extends
``n``, i.e., ``d`` contains every lineage in ``n`` and there is no other
label between them. Edges only go from smaller to larger lineage sets, so
the graph is acyclic.
"""

import networkx as nx
import pandas as pd

from .._utils import _docstring_parameter, _desc_thresh, _desc_max_node_size, \
    _desc_source, DEFAULT_MAX_NODE_SIZE
from ..checks import check_max_node_size, check_threshold
from .labels import LineageSet, branch_id, label_counts
from .._logging import _gen_logger

logger = _gen_logger(__name__)

# node name used when only single-lineage labels are present
SINGLE_LINEAGE_NODE = '1'


def under(label, universe, max_step=1):
    """ Find the labels in ``universe`` that extend ``label``.

    Parameters
    ----------
    label : {`LineageSet`, `str`}
        The label, e.g. "1,2".
    universe : Iterable({`LineageSet`, `str`})
        The candidate labels.
    max_step : {`int`, `None`}
        Maximum number of lineages a descendant may add to ``label``.
        With the default of 1, descendants contain all lineages of
        ``label`` plus exactly one more. If `None`, every strict superset
        is a descendant.

    Returns
    -------
    desc : `set`
        Members of ``universe`` that are strict supersets of ``label``,
        returned as given (strings stay strings).

    Examples
    --------
    >>> sorted(under("1", ["1", "2", "1,2", "1,3", "1,2,3"]))
    ['1,2', '1,3']
    """
    node = LineageSet.coerce(label)
    desc = set()
    for d in universe:
        d_set = LineageSet.coerce(d)
        if not node < d_set:
            continue
        if (max_step is None) or (len(d_set) - len(node) <= max_step):
            desc.add(d)
    return desc


def _canonical_counts(labels):
    """ Cells per canonical label, ordered by number of lineages. """
    merged = {}
    for label, n in label_counts(labels).items():
        key = LineageSet.from_label(label).label
        merged[key] = merged.get(key, 0) + int(n)
    order = sorted(merged, key=lambda k: LineageSet.from_label(k).sort_key())
    return pd.Series([merged[k] for k in order], index=pd.Index(order, dtype=object),
                     name='cells', dtype=int)


def _single_node_graph(name, n_cells, max_node_size):
    G = nx.DiGraph(max_node_size=max_node_size)
    G.add_node(name, cells=n_cells, size=float(max_node_size))
    return G


@_docstring_parameter(max_node_size=_desc_max_node_size)
def build_branch_graph(labels, max_node_size=DEFAULT_MAX_NODE_SIZE, span_gaps=False):
    """\
    Build the graph of direct extensions between cell labels.

    Parameters
    ----------
    labels : {{`pandas.Series`, Iterable(`str`)}}
        Cell labels as returned by :func:`branchflow.pose.labels.assign_labels`.
        If categorical, every category is a node, even one without cells.
    {max_node_size}
    span_gaps : `bool`
        If `False`, only labels that add exactly one lineage are connected.
        If `True`, a label may be connected to any label that contains it,
        unless the relationship is implied through an intermediate label.

    Returns
    -------
    G : `networkx.DiGraph`
        Nodes are labels with attributes

        - ``'cells'`` : number of cells with exactly that label.
        - ``'size'`` : ``max_node_size * cells / max(cells)``.

        .. note::
           If no label has more than one lineage, ``G`` has a single node
           holding all cells. If there is exactly one distinct label, ``G``
           has that label as its only node and no edges.
    """
    check_max_node_size(max_node_size)

    counts = _canonical_counts(labels)
    n_cells = int(counts.sum())
    if n_cells == 0:
        raise ValueError("At least one labeled cell is required to build the branch graph.")

    nodes = list(counts.index)
    node_sets = {n: LineageSet.from_label(n) for n in nodes}
    nlins = {n: len(s) for n, s in node_sets.items()}
    max_l = max(nlins.values())
    logger.debug(f"Label universe: {nodes}")

    if max_l <= 1:  # only one lineage
        name = nodes[0] if len(nodes) == 1 else SINGLE_LINEAGE_NODE
        logger.info("No cell is assigned to multiple lineages, returning a single node.")
        return _single_node_graph(name, n_cells, max_node_size)
    if len(nodes) == 1:  # only one node, possibly multiple lineages
        logger.info(f"All cells share the label {nodes[0]!r}, returning a single node.")
        return _single_node_graph(nodes[0], n_cells, max_node_size)

    max_step = None if span_gaps else 1
    G = nx.DiGraph(max_node_size=max_node_size)
    G.add_nodes_from(nodes)

    # for each node n at level l
    for l in range(1, max_l + 1):
        for n in [k for k in nodes if nlins[k] == l]:
            # find all descendants of n
            desc = under(n, nodes, max_step=max_step)
            granddesc = None
            for d in sorted(desc, key=lambda k: node_sets[k].sort_key()):
                if nlins[d] - l >= 2:
                    # check for intermediates
                    if granddesc is None:
                        granddesc = set().union(*[under(e, nodes, max_step=max_step) for e in desc])
                    if d in granddesc:
                        logger.trace(f"Skip edge ({n!r}, {d!r}), implied through an intermediate label.")
                        continue
                G.add_edge(n, d)
                logger.trace(f"Add edge ({n!r}, {d!r}).")

    max_cells = counts.max()
    for n in nodes:
        G.nodes[n]['cells'] = int(counts[n])
        G.nodes[n]['size'] = float(max_node_size * counts[n] / max_cells)

    logger.info(f"Branch graph with {G.number_of_nodes()} nodes and {G.number_of_edges()} edges.")
    return G


@_docstring_parameter(x=_desc_source, thresh=_desc_thresh, max_node_size=_desc_max_node_size)
def branch_graph(x, thresh=None, max_node_size=DEFAULT_MAX_NODE_SIZE, span_gaps=False):
    """\
    Build a graph describing the relationships between the different branch assignments.

    Parameters
    ----------
    {x}
    {thresh}
    {max_node_size}
    span_gaps : `bool`
        See :func:`build_branch_graph`.

    Returns
    -------
    G : `networkx.DiGraph`
        The branch graph, see :func:`build_branch_graph`.
    """
    if thresh is not None:
        check_threshold(thresh)
    check_max_node_size(max_node_size)

    labels = branch_id(x, thresh=thresh)
    return build_branch_graph(labels, max_node_size=max_node_size, span_gaps=span_gaps)

import numpy as np
import pandas as pd

from ..pose.labels import LineageSet, label_counts, sort_labels


def node_table(G):
    """ Node attributes of the branch graph.

    Parameters
    ----------
    G : `networkx.DiGraph`
        The branch graph.

    Returns
    -------
    nodes : `pandas.DataFrame`
        Indexed by label, with columns ``'cells'``, ``'size'`` and
        ``'n_lineages'``, ordered by number of lineages.
    """
    order = sort_labels(G.nodes())
    nodes = pd.DataFrame({'cells': [G.nodes[n].get('cells', 0) for n in order],
                          'size': [G.nodes[n].get('size', 0.) for n in order],
                          'n_lineages': [LineageSet.from_label(n).n_lineages for n in order]},
                         index=pd.Index(order, dtype=object, name='label'))
    return nodes


def edge_table(G):
    """ Edges of the branch graph as a `pandas.DataFrame` with columns ``'source'`` and ``'target'``. """
    edges = sorted(G.edges(), key=lambda e: (LineageSet.from_label(e[0]).sort_key(),
                                             LineageSet.from_label(e[1]).sort_key()))
    return pd.DataFrame(edges, columns=['source', 'target'], dtype=object)


def universe_table(labels, n_lineages=None):
    """ Summary of the label universe.

    Parameters
    ----------
    labels : {`pandas.Series`, Iterable(`str`)}
        Cell labels as returned by :func:`branchflow.pose.labels.assign_labels`.
    n_lineages : `int`, optional
        Number of lineages. If `None`, the largest index found in ``labels`` is used.

    Returns
    -------
    universe : `pandas.DataFrame`
        One row per label with the number of cells, the number of lineages and
        a boolean membership column for each lineage index ``1, ..., n_lineages``.
    """
    counts = label_counts(labels)
    sets = [LineageSet.from_label(k) for k in counts.index]
    if n_lineages is None:
        n_lineages = max([max(s) for s in sets if s], default=0)

    membership = np.zeros((len(sets), n_lineages), dtype=bool)
    for row, s in enumerate(sets):
        membership[row, [ix - 1 for ix in s if ix <= n_lineages]] = True

    universe = pd.DataFrame(membership, index=counts.index.rename('label'),
                            columns=list(range(1, n_lineages + 1)))
    universe.insert(0, 'n_lineages', [len(s) for s in sets])
    universe.insert(0, 'cells', counts.values)
    return universe

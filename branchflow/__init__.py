"""
The :mod:`branchflow` module assigns cells to lineages, or combinations of
lineages, from the lineage weights of a trajectory fit and builds the graph
of how the lineage assignments branch.


To do:
======
- Currently, __version__ must be manually updated in _version.py and setup.py.
  This should be automated to ensure agreement.
"""

from ._version import __version__

from .checks import InvalidParameter
from .keepers import LineageSource, LineageResult, ExperimentLineages, as_lineage_source
from .pose import LineageSet, assign_labels, branch_id, label_counts, under, \
    build_branch_graph, branch_graph
from .probe import node_table, edge_table, universe_table
from ._logging import logger, set_verbose

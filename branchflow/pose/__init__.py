"""
**POSE** : **P**\\ seudo-\\ **O**\\ rganization **\\ S**\\ ch\\ **E**\\ ma

A library for organizing cells by the lineages they were assigned to.

Given each cell's weight on every lineage of a trajectory fit, cells are
labeled with the set of lineages they belong to, and the distinct labels
are organized in a directed graph where an edge connects a set of lineages
to the sets that directly extend it. The graph shows where lineages share
cells and how they branch apart.
"""

from .labels import LineageSet, assign_labels, branch_id, label_counts, sort_labels
from .branching import under, build_branch_graph, branch_graph

"""
**PROBE**

Tools to **probe** the computed branch assignments and branch graph,
intended for downstream reporting and rendering of the lineage
relationships.
"""

from .tables import node_table, edge_table, universe_table

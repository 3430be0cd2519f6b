"""
**KEEPERS**

Adapters that keep the lineage weights produced by an upstream
trajectory fit and expose them through :class:`LineageSource`.
"""

from .sources import LineageSource, LineageResult, ExperimentLineages, as_lineage_source, \
    DEFAULT_WEIGHTS_KEY, DEFAULT_NAMES_KEY

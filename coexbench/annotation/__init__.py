"""
Reference annotations used as ground truth for gene pairs.

- PathwayAnnotation: test genes and the same-pathway relation
- ParalogGroups: gene to paralog group, for excluding paralogous pairs
"""

from .pathways import PathwayAnnotation, load_pathways
from .paralogs import ParalogGroups, load_paralogs

__all__ = [
    "PathwayAnnotation",
    "load_pathways",
    "ParalogGroups",
    "load_paralogs",
]

"""
Paralog Groups

Pairs of genes from the same paralog group (e.g. sharing a KEGG
orthology ID) are left out of the true/false totals, so that coexpression
driven by shared ancestry does not inflate the score.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..utils.io import iter_tsv
from ..utils.logging import get_logger


logger = get_logger("paralogs")


@dataclass
class ParalogGroups:
    """Gene -> paralog group ID, restricted to genes under test."""
    
    groups: Dict[str, str] = field(default_factory=dict)
    
    def __len__(self) -> int:
        return len(self.groups)
    
    def group_of(self, gene: str) -> Optional[str]:
        return self.groups.get(gene)
    
    def is_paralog_pair(self, gene_a: str, gene_b: str) -> bool:
        """True if both genes are mapped and to the same group."""
        group = self.groups.get(gene_a)
        return group is not None and group == self.groups.get(gene_b)


def load_paralogs(
    filepath: Optional[str | Path],
    test_genes: Iterable[str],
) -> ParalogGroups:
    """
    Load paralog groups.
    
    Each line holds a group ID followed by gene IDs, tab-separated. Only
    genes under test are kept and groups with fewer than two of them are
    ignored. A gene listed in several groups keeps the last one read.
    
    Parameters
    ----------
    filepath : str or Path, optional
        Paralog group file. ``None`` or empty yields no groups.
    test_genes : iterable of str
        Genes under test.
        
    Returns
    -------
    ParalogGroups
        Gene to group mapping.
    """
    paralogs = ParalogGroups()
    
    if filepath:
        if not isinstance(test_genes, (set, frozenset, dict)):
            test_genes = set(test_genes)
        
        for _, fields in iter_tsv(filepath):
            group_id = fields[0]
            members = [g for g in dict.fromkeys(fields[1:]) if g in test_genes]
            if len(members) < 2:
                continue
            for gene in members:
                paralogs.groups[gene] = group_id
    
    logger.info(f"paralogs: {filepath or ''} ({len(paralogs)} genes)")
    
    return paralogs

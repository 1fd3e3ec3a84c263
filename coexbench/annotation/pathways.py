"""
Pathway Annotation

Loads pathway membership (e.g. a KEGG pathway-to-gene link table) and
builds the set of genes under test together with the symmetric
same-pathway relation that defines positive gene pairs.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Set

from ..utils.config import DEFAULT_MAX_GENES_IN_PATHWAY, MIN_GENES_IN_PATHWAY
from ..utils.io import iter_tsv
from ..utils.logging import get_logger


logger = get_logger("pathways")


@dataclass
class PathwayAnnotation:
    """
    Genes under test and their pathway co-membership.
    
    Attributes
    ----------
    partners : dict
        Gene -> set of genes sharing at least one admissible pathway.
        Every test gene has an entry; a gene is never its own partner.
    n_pathways : int
        Number of admissible pathway records.
    n_skipped : int
        Number of records rejected by the size filter.
    """
    
    partners: Dict[str, Set[str]] = field(default_factory=dict)
    n_pathways: int = 0
    n_skipped: int = 0
    
    @property
    def test_genes(self) -> Set[str]:
        return set(self.partners)
    
    def __len__(self) -> int:
        return len(self.partners)
    
    def __contains__(self, gene: str) -> bool:
        return gene in self.partners
    
    def is_test_gene(self, gene: str) -> bool:
        return gene in self.partners
    
    def same_pathway(self, gene_a: str, gene_b: str) -> bool:
        """True if both genes co-occur in an admissible pathway."""
        partners = self.partners.get(gene_a)
        return partners is not None and gene_b in partners
    
    def add_pathway(self, genes: Iterable[str]) -> None:
        """
        Register one admissible pathway.
        
        Links accumulate across pathways, so a gene in several pathways
        is paired with the union of their members.
        """
        members: List[str] = list(dict.fromkeys(genes))
        for i, g0 in enumerate(members):
            self.partners.setdefault(g0, set())
            for g1 in members[i + 1:]:
                self.partners[g0].add(g1)
                self.partners.setdefault(g1, set()).add(g0)
        self.n_pathways += 1


def parse_pathway_fields(fields: List[str]) -> List[str]:
    """Gene IDs of a pathway record, without blanks or repeats."""
    return list(dict.fromkeys(g for g in fields[1:] if g))


def load_pathways(
    filepath: str | Path,
    max_genes_in_pathway: int = DEFAULT_MAX_GENES_IN_PATHWAY,
) -> PathwayAnnotation:
    """
    Load a pathway annotation file.
    
    Each line holds a pathway ID followed by its gene IDs, tab-separated.
    Pathways with fewer than two or more than ``max_genes_in_pathway``
    genes are skipped without warning.
    
    Parameters
    ----------
    filepath : str or Path
        Pathway annotation file.
    max_genes_in_pathway : int
        Size ceiling for admissible pathways.
        
    Returns
    -------
    PathwayAnnotation
        Test genes and same-pathway relation.
    """
    annotation = PathwayAnnotation()
    
    for _, fields in iter_tsv(filepath):
        genes = parse_pathway_fields(fields)
        if len(genes) > max_genes_in_pathway or len(genes) < MIN_GENES_IN_PATHWAY:
            annotation.n_skipped += 1
            continue
        annotation.add_pathway(genes)
    
    logger.info(f"pathways: {filepath} ({len(annotation)} genes)")
    logger.debug(
        f"{annotation.n_pathways} pathways used, "
        f"{annotation.n_skipped} outside size bounds"
    )
    
    return annotation

"""
Pair Collector

Reads a coexpression directory in the layout of the ATTED-II bulk
download: one file per gene, named by the gene ID, each line holding a
partner gene ID and a coexpression value separated by a tab.

Every unordered pair of distinct genes under test is recorded once, from
whichever of its two files is read first. Files are read in
lexicographic order, so the retained direction is reproducible.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Set, Tuple

import numpy as np
import pandas as pd

from ..annotation.paralogs import ParalogGroups
from ..annotation.pathways import PathwayAnnotation
from ..exceptions import FormatError
from ..utils.io import iter_tsv
from ..utils.logging import get_logger


logger = get_logger("collector")

PROGRESS_EVERY = 1000


@dataclass
class PairRecord:
    """One scored gene pair."""
    
    gene_a: str
    gene_b: str
    coexpression_value: float
    is_positive: bool
    is_paralog: bool
    sequence_id: int


@dataclass
class PairCollection:
    """
    Column-oriented set of collected pairs plus the pair totals.
    
    ``total_true`` and ``total_false`` count non-paralog pairs only.
    """
    
    gene_a: List[str]
    gene_b: List[str]
    values: np.ndarray
    positive: np.ndarray
    paralog: np.ndarray
    sequence_ids: np.ndarray
    total_true: int
    total_false: int
    
    def __len__(self) -> int:
        return len(self.values)
    
    @property
    def n_paralog_pairs(self) -> int:
        return int(self.paralog.sum())
    
    def records(self) -> Iterator[PairRecord]:
        for i in range(len(self)):
            yield PairRecord(
                gene_a=self.gene_a[i],
                gene_b=self.gene_b[i],
                coexpression_value=float(self.values[i]),
                is_positive=bool(self.positive[i]),
                is_paralog=bool(self.paralog[i]),
                sequence_id=int(self.sequence_ids[i]),
            )
    
    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "sequence_id": self.sequence_ids,
            "gene_a": self.gene_a,
            "gene_b": self.gene_b,
            "value": self.values,
            "is_positive": self.positive,
            "is_paralog": self.paralog,
        })


def parse_value(token: str) -> Optional[float]:
    """
    Parse a coexpression value.
    
    Accepts anything ``float`` does (including scientific notation and
    infinities); returns None for non-numeric text and NaN.
    """
    try:
        value = float(token)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


class PairCollector:
    """
    Run context for pair collection.
    
    Holds the dedup table, the sequence counter, the pair totals and the
    collected columns for a single scoring run.
    
    Parameters
    ----------
    pathways : PathwayAnnotation
        Genes under test and the same-pathway relation.
    paralogs : ParalogGroups, optional
        Paralog groups; no pair is excluded when omitted.
    """
    
    def __init__(
        self,
        pathways: PathwayAnnotation,
        paralogs: Optional[ParalogGroups] = None,
    ):
        self.pathways = pathways
        self.paralogs = paralogs if paralogs is not None else ParalogGroups()
        
        self.seen: Set[Tuple[str, str]] = set()
        self.next_sequence_id = 1
        self.total_true = 0
        self.total_false = 0
        self.n_files = 0
        
        self._gene_a: List[str] = []
        self._gene_b: List[str] = []
        self._values: List[float] = []
        self._positive: List[bool] = []
        self._paralog: List[bool] = []
        self._sequence_ids: List[int] = []
    
    def __len__(self) -> int:
        return len(self._values)
    
    @staticmethod
    def pair_key(gene_a: str, gene_b: str) -> Tuple[str, str]:
        return (gene_a, gene_b) if gene_a <= gene_b else (gene_b, gene_a)
    
    def gene_files(self, coex_dir: str | Path) -> List[Tuple[str, Path]]:
        """
        List (gene, path) for the files of genes under test.
        
        A ``.gz`` suffix is not part of the gene ID.
        """
        coex_dir = Path(coex_dir)
        if not coex_dir.is_dir():
            raise FileNotFoundError(f"Coexpression directory not found: {coex_dir}")
        
        files = []
        for path in sorted(coex_dir.iterdir(), key=lambda p: p.name):
            if path.name.startswith(".") or not path.is_file():
                continue
            gene = path.name[:-3] if path.name.endswith(".gz") else path.name
            if self.pathways.is_test_gene(gene):
                files.append((gene, path))
        return files
    
    def collect_directory(self, coex_dir: str | Path) -> PairCollection:
        """
        Collect pairs from every gene file in a coexpression directory.
        
        Returns
        -------
        PairCollection
            All pairs collected so far, with totals.
        """
        files = self.gene_files(coex_dir)
        logger.debug(f"{len(files)} gene files to read in {coex_dir}")
        
        start = datetime.now()
        for i, (gene, path) in enumerate(files, start=1):
            self.collect_file(gene, path)
            if i % PROGRESS_EVERY == 0:
                logger.debug(f"Read {i}/{len(files)} gene files, {len(self)} pairs")
        
        elapsed = (datetime.now() - start).total_seconds()
        logger.debug(
            f"{len(self)} pairs collected from {len(files)} files in {elapsed:.1f}s "
            f"(true={self.total_true}, false={self.total_false})"
        )
        return self.result()
    
    def collect_file(self, gene: str, filepath: str | Path) -> int:
        """
        Stream one gene's coexpression file.
        
        Parameters
        ----------
        gene : str
            Gene the file belongs to.
        filepath : str or Path
            The file.
            
        Returns
        -------
        int
            Number of new pairs recorded from this file.
            
        Raises
        ------
        FormatError
            If a line is not a gene/value pair, or an admitted value is
            not numeric.
        """
        if not self.pathways.is_test_gene(gene):
            return 0
        
        n_before = len(self)
        for line_no, fields in iter_tsv(filepath):
            while len(fields) > 2 and not fields[-1]:
                fields.pop()
            if len(fields) != 2:
                raise FormatError(
                    f"expected partner gene and value, got {len(fields)} field(s)",
                    path=filepath,
                    line_no=line_no,
                )
            partner, token = fields
            if not partner:
                raise FormatError("empty gene ID", path=filepath, line_no=line_no)
            
            if partner == gene or not self.pathways.is_test_gene(partner):
                continue
            key = self.pair_key(gene, partner)
            if key in self.seen:
                continue
            
            value = parse_value(token)
            if value is None:
                raise FormatError(f"not a number: {token!r}", path=filepath, line_no=line_no)
            
            self.add_pair(gene, partner, value)
            self.seen.add(key)
        
        self.n_files += 1
        return len(self) - n_before
    
    def add_pair(self, gene_a: str, gene_b: str, value: float) -> None:
        positive = self.pathways.same_pathway(gene_a, gene_b)
        paralog = self.paralogs.is_paralog_pair(gene_a, gene_b)
        
        self._gene_a.append(gene_a)
        self._gene_b.append(gene_b)
        self._values.append(value)
        self._positive.append(positive)
        self._paralog.append(paralog)
        self._sequence_ids.append(self.next_sequence_id)
        self.next_sequence_id += 1
        
        if not paralog:
            if positive:
                self.total_true += 1
            else:
                self.total_false += 1
    
    def result(self) -> PairCollection:
        return PairCollection(
            gene_a=list(self._gene_a),
            gene_b=list(self._gene_b),
            values=np.asarray(self._values, dtype=float),
            positive=np.asarray(self._positive, dtype=bool),
            paralog=np.asarray(self._paralog, dtype=bool),
            sequence_ids=np.asarray(self._sequence_ids, dtype=np.int64),
            total_true=self.total_true,
            total_false=self.total_false,
        )

"""
Input/Output utilities for annotation and coexpression files.
"""

import gzip
import json
from pathlib import Path
from typing import Dict, IO, Iterator, List, Tuple, Union

import numpy as np
import pandas as pd


def open_text(filepath: str | Path) -> IO[str]:
    """
    Open a text file for reading, transparently handling gzip.
    
    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    filepath = Path(filepath)
    
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")
    
    if str(filepath).endswith('.gz'):
        return gzip.open(filepath, 'rt')
    return open(filepath, 'r')


def iter_tsv(filepath: str | Path) -> Iterator[Tuple[int, List[str]]]:
    """
    Stream a tab-separated file.
    
    Parameters
    ----------
    filepath : str or Path
        Path to the file (optionally gzip-compressed).
        
    Yields
    ------
    tuple
        (1-based line number, list of fields) for every non-blank line.
    """
    with open_text(filepath) as f:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            yield line_no, line.split("\t")


def write_table(
    df: pd.DataFrame,
    filepath: str | Path,
    sep: str = "\t",
    index: bool = False,
) -> Path:
    """
    Write a dataframe as a delimited table.
    
    Compression is inferred from the suffix (``.gz`` gives gzip).
    
    Returns
    -------
    Path
        The written file.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    
    df.to_csv(
        filepath,
        sep=sep,
        compression="infer",
        index=index,
    )
    return filepath


def write_json(data: Union[Dict, List], filepath: str | Path, indent: int = 2) -> Path:
    """
    Write data to a JSON file, converting numpy scalars to plain values.
    
    Returns
    -------
    Path
        The written file.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    
    def to_builtin(obj):
        if isinstance(obj, np.generic):
            return obj.item()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    
    with open(filepath, 'w') as f:
        json.dump(data, f, indent=indent, default=to_builtin)
        f.write("\n")
    return filepath

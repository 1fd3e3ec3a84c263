"""
Configuration management utilities.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_FPR_BOUND = 0.01
DEFAULT_MAX_GENES_IN_PATHWAY = 50

# Pathways smaller than this never produce a gene pair.
MIN_GENES_IN_PATHWAY = 2


def load_config(config_path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.
    
    Parameters
    ----------
    config_path : str or Path
        Path to the YAML configuration file.
        
    Returns
    -------
    dict
        Configuration dictionary (empty if the file is empty).
    """
    config_path = Path(config_path)
    
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration must be a mapping: {config_path}")
    
    return config


def _as_number(key: str, value: Any, kind: type) -> Any:
    """Coerce a numeric option, raising ValueError for anything else."""
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid {key}: {value!r}. Must be a number")
    try:
        number = kind(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {key}: {value!r}. Must be a number") from None
    if kind is int and isinstance(value, float) and number != value:
        raise ValueError(f"Invalid {key}: {value!r}. Must be an integer")
    return number

@dataclass
class ScoringConfig:
    """
    Options for one scoring run.
    
    Attributes
    ----------
    coex_dir : str
        Directory holding one coexpression file per gene.
    pathway_file : str
        Pathway annotation (pathway ID followed by gene IDs, tab-separated).
    paralog_file : str, optional
        Paralog groups (group ID followed by gene IDs, tab-separated).
    smaller_is_better : bool
        Rank pairs by ascending coexpression value.
    fpr_bound : float
        Upper false-positive-rate bound of the integration window.
    max_genes_in_pathway : int
        Pathways with more genes than this are ignored.
    """
    
    coex_dir: str
    pathway_file: str
    paralog_file: Optional[str] = None
    smaller_is_better: bool = False
    fpr_bound: float = DEFAULT_FPR_BOUND
    max_genes_in_pathway: int = DEFAULT_MAX_GENES_IN_PATHWAY
    
    @property
    def direction(self) -> str:
        """Label used in the report line."""
        return "smaller" if self.smaller_is_better else "larger"
    
    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """
        Build a config from a dictionary.
        
        A nested ``scoring`` section is used when present, so the same
        YAML file can carry other sections.
        """
        if "scoring" in config and isinstance(config["scoring"], dict):
            config = config["scoring"]
        
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {unknown}")
        
        for key in ("coex_dir", "pathway_file"):
            if not config.get(key):
                raise ValueError(f"Missing required configuration key: {key}")
        
        scoring_config = cls(**config)
        scoring_config.validate()
        return scoring_config
    
    def validate(self) -> bool:
        """
        Validate option values.
        
        Returns
        -------
        bool
            True if valid, raises exception otherwise.
        """
        if not self.coex_dir:
            raise ValueError("coex_dir is required")
        if not self.pathway_file:
            raise ValueError("pathway_file is required")
        
        fpr = _as_number("fpr_bound", self.fpr_bound, float)
        if not 0.0 < fpr <= 1.0:
            raise ValueError(f"Invalid fpr_bound: {self.fpr_bound}. Must be in (0, 1]")
        self.fpr_bound = fpr
        
        max_genes = _as_number("max_genes_in_pathway", self.max_genes_in_pathway, int)
        if max_genes < MIN_GENES_IN_PATHWAY:
            raise ValueError(
                f"Invalid max_genes_in_pathway: {self.max_genes_in_pathway}. "
                f"Must be >= {MIN_GENES_IN_PATHWAY}"
            )
        self.max_genes_in_pathway = max_genes
        
        if not isinstance(self.smaller_is_better, bool):
            raise ValueError(
                f"Invalid smaller_is_better: {self.smaller_is_better!r}. "
                "Must be true or false"
            )
        
        return True
    
    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_scoring_config(
    config_path: Optional[str | Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ScoringConfig:
    """
    Build a ScoringConfig from an optional YAML file and explicit overrides.
    
    Parameters
    ----------
    config_path : str or Path, optional
        YAML file with the scoring options.
    overrides : dict, optional
        Values that take precedence over the file. ``None`` values are
        ignored so unset command-line flags do not mask the file.
        
    Returns
    -------
    ScoringConfig
        Validated configuration.
    """
    config: Dict[str, Any] = {}
    if config_path is not None:
        config = load_config(config_path)
        if "scoring" in config and isinstance(config["scoring"], dict):
            config = config["scoring"]
        config = dict(config)
    
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    
    return ScoringConfig.from_dict(config)

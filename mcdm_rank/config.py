# -*- coding: utf-8 -*-
"""Configuration management for MCDM ranking."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from enum import Enum
import json


class WeightingMode(Enum):
    """Supported ways of assigning criterion weights."""
    DIRECT = "direct"
    EQUAL = "equal"
    AHP = "ahp"


# Saaty's Random Index by matrix order
RANDOM_INDEX: Dict[int, float] = {
    1: 0.0, 2: 0.0, 3: 0.58, 4: 0.9, 5: 1.12,
    6: 1.24, 7: 1.32, 8: 1.41, 9: 1.45, 10: 1.49,
}


@dataclass
class PathConfig:
    """File and directory paths configuration."""
    base_dir: Path = field(default_factory=lambda: Path.cwd())
    output_name: str = "outputs"

    @property
    def output_dir(self) -> Path:
        return self.base_dir / self.output_name

    @property
    def results_dir(self) -> Path:
        return self.output_dir / "results"

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    def ensure_directories(self) -> None:
        """Create all necessary directories."""
        for d in [self.output_dir, self.results_dir, self.logs_dir]:
            d.mkdir(parents=True, exist_ok=True)


@dataclass
class WASPASConfig:
    """WASPAS method configuration."""
    lam: float = 0.5  # weight of the WSM component


@dataclass
class VIKORConfig:
    """VIKOR method configuration."""
    v: float = 0.5  # weight of the group utility strategy


@dataclass
class AHPConfig:
    """AHP consistency checking configuration."""
    consistency_threshold: float = 0.10
    random_index: Dict[int, float] = field(default_factory=lambda: dict(RANDOM_INDEX))
    # Used for matrices larger than the table; carried over unverified.
    random_index_fallback: float = 1.49


@dataclass
class ValidationConfig:
    """Decision problem completeness checks."""
    min_alternatives: int = 2
    min_criteria: int = 2
    weight_sum_tolerance: float = 0.01


@dataclass
class ExportConfig:
    """Result export configuration."""
    decimals: int = 4
    header: tuple = ("Rank", "Alternative", "Score")
    default_label: str = "MCDM"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    debug_file: Optional[Path] = None


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    paths: PathConfig = field(default_factory=PathConfig)
    waspas: WASPASConfig = field(default_factory=WASPASConfig)
    vikor: VIKORConfig = field(default_factory=VIKORConfig)
    ahp: AHPConfig = field(default_factory=AHPConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def output_dir(self) -> str:
        """Get output directory path as string."""
        return str(self.paths.output_dir)

    def to_dict(self) -> Dict:
        def _to_dict(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _to_dict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Enum):
                return obj.value
            elif isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, (list, tuple)):
                return [_to_dict(i) for i in obj]
            elif isinstance(obj, dict):
                return {k: _to_dict(v) for k, v in obj.items()}
            return obj
        return _to_dict(self)

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        return f"""
{'='*60}
CONFIGURATION SUMMARY - MCDM Ranking
{'='*60}

METHODS:
  WASPAS lambda: {self.waspas.lam}
  VIKOR v parameter: {self.vikor.v}

AHP:
  Consistency threshold: {self.ahp.consistency_threshold}
  RI fallback (n > {max(self.ahp.random_index)}): {self.ahp.random_index_fallback}

EXPORT:
  Score decimals: {self.export.decimals}
  Output: {self.output_dir}
{'='*60}
"""


_config: Optional[Config] = None

def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config

def get_default_config() -> Config:
    """Get a fresh default configuration."""
    return Config()

def set_config(config: Config) -> None:
    global _config
    _config = config

def reset_config() -> None:
    global _config
    _config = Config()

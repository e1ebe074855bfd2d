# -*- coding: utf-8 -*-
"""
mcdm-rank: Multi-Criteria Decision Making for Ranking Alternatives
==================================================================

Ranks a fixed set of alternatives against weighted benefit/cost criteria.

Package Structure
-----------------
mcdm_rank/
├── models.py           # Criterion, Alternative, RankedResult
├── config.py           # Dataclass configuration
├── logger.py           # Logging setup
├── weighting/
│   ├── normalization.py  # Weight, min-max and vector normalization
│   ├── ahp.py            # AHP weights + consistency ratio
│   └── base.py           # Direct / equal / AHP weighting modes
├── mcdm/
│   ├── base.py           # Shared ranking contract
│   └── traditional/      # WSM, WPM, WASPAS, TOPSIS, VIKOR
├── analysis/
│   └── comparison.py     # Rank agreement across methods
├── problem.py          # DecisionProblem (definition -> results)
└── output_manager.py   # Text export and CSV files

Quick Start
-----------
>>> from mcdm_rank import Alternative, Criterion, calculate_results, export_to_table
>>> criteria = [Criterion('Quality', 'benefit', 0.6), Criterion('Price', 'cost', 0.4)]
>>> alternatives = [Alternative('A', [8, 300]), Alternative('B', [6, 200])]
>>> results = calculate_results('topsis', alternatives, criteria)
>>> print(export_to_table(results, 'TOPSIS'))
"""

__version__ = "1.0.0"

from .config import Config, WeightingMode, get_default_config, get_config, set_config, reset_config
from .logger import setup_logger, get_logger, get_module_logger, LoggerFactory
from .models import (
    Alternative, Criterion, CriterionType, RankedResult,
    decision_matrix, generate_id,
)
from .weighting import (
    normalize_weights,
    linear_normalize,
    vector_normalize,
    AHPCalculator,
    AHPResult,
    PairwiseComparisonMatrix,
    calculate_ahp,
    create_pairwise_matrix,
    update_pairwise_matrix,
    calculate_weights,
)
from .mcdm import (
    MCDMMethod, MCDM_METHODS,
    calculate_wsm, calculate_wpm, calculate_waspas,
    calculate_topsis, calculate_vikor,
    calculate_results, get_calculator, get_all_calculators,
)
from .problem import DecisionProblem
from .output_manager import OutputManager, export_to_table, results_to_frame
from .analysis import compare_rankings, compare_all_methods

__all__ = [
    # Config
    'Config', 'WeightingMode', 'get_default_config', 'get_config',
    'set_config', 'reset_config',
    # Logging
    'setup_logger', 'get_logger', 'get_module_logger', 'LoggerFactory',
    # Models
    'Alternative', 'Criterion', 'CriterionType', 'RankedResult',
    'decision_matrix', 'generate_id',
    # Weighting
    'normalize_weights', 'linear_normalize', 'vector_normalize',
    'AHPCalculator', 'AHPResult', 'PairwiseComparisonMatrix',
    'calculate_ahp', 'create_pairwise_matrix', 'update_pairwise_matrix',
    'calculate_weights',
    # Ranking
    'MCDMMethod', 'MCDM_METHODS',
    'calculate_wsm', 'calculate_wpm', 'calculate_waspas',
    'calculate_topsis', 'calculate_vikor',
    'calculate_results', 'get_calculator', 'get_all_calculators',
    # Problem / output / analysis
    'DecisionProblem',
    'OutputManager', 'export_to_table', 'results_to_frame',
    'compare_rankings', 'compare_all_methods',
]

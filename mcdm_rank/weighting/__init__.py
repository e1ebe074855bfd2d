# -*- coding: utf-8 -*-
"""
Weighting Module

Criterion weight handling for MCDM:
- normalize_weights: rescale raw weights to sum to 1
- linear_normalize / vector_normalize: decision-matrix normalization
- AHP: weights from pairwise comparisons with consistency checking
- calculate_weights: direct, equal or AHP weighting modes
"""

from .normalization import normalize_weights, linear_normalize, vector_normalize
from .ahp import (
    AHPCalculator,
    AHPResult,
    PairwiseComparisonMatrix,
    calculate_ahp,
    create_pairwise_matrix,
    update_pairwise_matrix,
)
from .base import WeightResult, apply_weights, calculate_weights

__all__ = [
    'normalize_weights',
    'linear_normalize',
    'vector_normalize',
    'AHPCalculator',
    'AHPResult',
    'PairwiseComparisonMatrix',
    'calculate_ahp',
    'create_pairwise_matrix',
    'update_pairwise_matrix',
    'WeightResult',
    'apply_weights',
    'calculate_weights',
]

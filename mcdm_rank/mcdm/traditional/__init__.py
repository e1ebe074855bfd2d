# -*- coding: utf-8 -*-
"""
Traditional (crisp) MCDM methods.

- WSM: Weighted Sum Model
- WPM: Weighted Product Model
- WASPAS: Weighted Aggregated Sum Product Assessment
- TOPSIS: Similarity to the ideal solution
- VIKOR: Compromise ranking
"""

from .wsm import WSMCalculator, calculate_wsm
from .wpm import WPMCalculator, calculate_wpm
from .waspas import WASPASCalculator, calculate_waspas
from .topsis import TOPSISCalculator, calculate_topsis
from .vikor import VIKORCalculator, VIKORCompromise, calculate_vikor

__all__ = [
    'WSMCalculator', 'calculate_wsm',
    'WPMCalculator', 'calculate_wpm',
    'WASPASCalculator', 'calculate_waspas',
    'TOPSISCalculator', 'calculate_topsis',
    'VIKORCalculator', 'VIKORCompromise', 'calculate_vikor',
]

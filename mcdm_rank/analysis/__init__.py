# -*- coding: utf-8 -*-
"""Analysis of rankings across methods."""

from .comparison import compare_rankings, compare_all_methods

__all__ = ['compare_rankings', 'compare_all_methods']

# -*- coding: utf-8 -*-
"""
Output Management for Ranking Results
=====================================

``export_to_table`` renders ranked results as the plain CSV-style text
offered for download::

    TOPSIS Results

    Rank,Alternative,Score
    1,Alpha,0.7321

``OutputManager`` writes that text, and a detailed table with the
method diagnostics, into ``<base>/results/``.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .config import get_config
from .models import RankedResult

logger = logging.getLogger(__name__)


def export_to_table(results: Sequence[RankedResult],
                    method_label: Optional[str] = None,
                    decimals: Optional[int] = None) -> str:
    """
    Render ranked results as tabular text.

    Line 1 is ``"<method_label> Results"``, line 2 is empty, line 3 is
    the header ``Rank,Alternative,Score``, followed by one row per result
    with the score in fixed-point notation. Without ``method_label`` the
    configured default label is used.
    """
    export_cfg = get_config().export
    if not method_label:
        method_label = export_cfg.default_label
    if decimals is None:
        decimals = export_cfg.decimals
    rows = [
        ",".join([str(r.rank), r.alternative_name, f"{r.score:.{decimals}f}"])
        for r in results
    ]
    return "\n".join([
        f"{method_label} Results",
        "",
        ",".join(export_cfg.header),
        *rows,
    ])


def results_to_frame(results: Sequence[RankedResult]) -> pd.DataFrame:
    """Results as a DataFrame: Rank, Alternative, Score, then diagnostics."""
    records = []
    for r in results:
        row = {'Rank': r.rank, 'Alternative': r.alternative_name, 'Score': r.score}
        row.update(r.details)
        records.append(row)
    if not records:
        return pd.DataFrame(columns=['Rank', 'Alternative', 'Score'])
    return pd.DataFrame.from_records(records)


def _safe_filename(name: str) -> str:
    cleaned = re.sub(r'[^\w.-]+', '_', name.strip())
    return cleaned or 'decision'


class OutputManager:
    """
    Manages result files under ``results/``.

    Parameters
    ----------
    base_output_dir : str or Path, optional
        Root output directory (default from config).
    """

    def __init__(self, base_output_dir: Optional[str] = None):
        if base_output_dir is None:
            base_output_dir = get_config().output_dir
        self.base_dir = Path(base_output_dir)
        self.results_dir = self.base_dir / 'results'
        self._setup_directories()
        self.timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

    def _setup_directories(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)

    def save_results(
        self,
        results: Sequence[RankedResult],
        method_label: str,
        project_name: str = '',
    ) -> str:
        """Write ``export_to_table`` text to ``<project>_results.csv``."""
        path = self.results_dir / f"{_safe_filename(project_name or 'decision')}_results.csv"
        path.write_text(export_to_table(results, method_label), encoding='utf-8')
        logger.info(f"Saved {method_label} results to {path}")
        return str(path)

    def save_details(
        self,
        results: Sequence[RankedResult],
        method_label: str,
        project_name: str = '',
    ) -> str:
        """Write ranks, scores and method diagnostics as a CSV table."""
        stem = _safe_filename(project_name or 'decision')
        path = self.results_dir / f"{stem}_{_safe_filename(method_label).lower()}_details.csv"
        results_to_frame(results).to_csv(path, index=False, float_format='%.6f')
        logger.info(f"Saved {method_label} details to {path}")
        return str(path)

    def save_all(
        self,
        results_by_method: Dict[str, Sequence[RankedResult]],
        project_name: str = '',
    ) -> List[str]:
        """Save detail tables for several methods, one file each."""
        return [
            self.save_details(results, label, project_name)
            for label, results in results_by_method.items()
        ]

# -*- coding: utf-8 -*-
"""
Decision Problem
================

Holds one decision problem while it is being defined: criteria and their
weighting mode, alternatives and their values, the AHP comparison matrix,
the chosen ranking method and the latest results.

Typical use::

    problem = DecisionProblem("Laptop", n_alternatives=3, n_criteria=2)
    problem.initialize()
    problem.update_criterion(1, name="Price", type="cost")
    problem.set_value(0, 0, 8.5)
    ...
    problem.select_method("topsis")
    results = problem.calculate_results()
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from .config import WeightingMode, get_config
from .mcdm import MCDMMethod, calculate_results
from .models import Alternative, Criterion, CriterionType, RankedResult
from .weighting.ahp import AHPCalculator, AHPResult, PairwiseComparisonMatrix
from .weighting.base import apply_weights, calculate_weights

logger = logging.getLogger(__name__)


@dataclass
class DecisionProblem:
    """State of a decision problem from definition to results."""
    project_name: str = ''
    n_alternatives: int = 3
    n_criteria: int = 3
    criteria: List[Criterion] = field(default_factory=list)
    alternatives: List[Alternative] = field(default_factory=list)
    weighting_mode: WeightingMode = WeightingMode.DIRECT
    ahp_matrix: PairwiseComparisonMatrix = field(
        default_factory=lambda: PairwiseComparisonMatrix.create(0))
    selected_method: Optional[MCDMMethod] = None
    results: Optional[List[RankedResult]] = None
    ahp_result: Optional[AHPResult] = None

    # -----------------------------------------------------------------
    # Setup
    # -----------------------------------------------------------------

    def initialize(self) -> None:
        """Create default criteria, alternatives and an all-ones AHP matrix."""
        n = self.n_criteria
        self.criteria = [
            Criterion(name=f"Criterion {i + 1}", type=CriterionType.BENEFIT,
                      weight=1 / n)
            for i in range(n)
        ]
        self.alternatives = [
            Alternative(name=f"Alternative {i + 1}", values=[0.0] * n)
            for i in range(self.n_alternatives)
        ]
        self.ahp_matrix = PairwiseComparisonMatrix.create(n)
        self.results = None
        self.ahp_result = None
        logger.debug(f"Initialized {self.n_alternatives} alternatives × {n} criteria")

    # -----------------------------------------------------------------
    # Editing
    # -----------------------------------------------------------------

    def update_criterion(self, index: int, **updates) -> Criterion:
        self.criteria[index] = replace(self.criteria[index], **updates)
        return self.criteria[index]

    def update_alternative(self, index: int, **updates) -> Alternative:
        self.alternatives[index] = replace(self.alternatives[index], **updates)
        return self.alternatives[index]

    def set_value(self, alt_index: int, crit_index: int, value: float) -> None:
        values = list(self.alternatives[alt_index].values)
        values[crit_index] = float(value)
        self.update_alternative(alt_index, values=values)

    def update_weights(self, weights: Sequence[float]) -> None:
        """Apply weights positionally; criteria past the end keep theirs."""
        self.criteria = apply_weights(self.criteria, list(weights))

    def set_weighting_mode(self, mode: Union[WeightingMode, str]) -> None:
        """Switch weighting mode; 'equal' assigns 1/n to every criterion."""
        self.weighting_mode = WeightingMode(mode)
        if self.weighting_mode is WeightingMode.EQUAL:
            result = calculate_weights(self.criteria, method="equal")
            self.update_weights(result.as_array)

    def set_pairwise(self, row: int, col: int, value: float) -> None:
        self.ahp_matrix.set(row, col, value)

    def apply_ahp(self) -> AHPResult:
        """Derive weights from the comparison matrix and apply them."""
        result = AHPCalculator().calculate(self.ahp_matrix)
        self.ahp_result = result
        if len(result.weights) > 0:
            self.update_weights(result.weights)
        return result

    def select_method(self, method: Union[MCDMMethod, str]) -> None:
        self.selected_method = MCDMMethod(method)

    # -----------------------------------------------------------------
    # Validation and results
    # -----------------------------------------------------------------

    def validation_errors(self) -> List[str]:
        """Reasons the problem is not ready to rank (empty when ready)."""
        cfg = get_config().validation
        errors = []
        if not self.project_name.strip():
            errors.append("Project name is required")
        if len(self.alternatives) < cfg.min_alternatives:
            errors.append(f"At least {cfg.min_alternatives} alternatives are required")
        if len(self.criteria) < cfg.min_criteria:
            errors.append(f"At least {cfg.min_criteria} criteria are required")
        if any(not c.name.strip() for c in self.criteria):
            errors.append("Every criterion needs a name")

        weight_sum = sum(c.weight for c in self.criteria)
        if self.criteria and abs(weight_sum - 1) >= cfg.weight_sum_tolerance:
            errors.append(f"Weights must sum to 100% (currently {weight_sum * 100:.1f}%)")

        for alt in self.alternatives:
            if not alt.name.strip():
                errors.append("Every alternative needs a name")
            if len(alt.values) != len(self.criteria):
                errors.append(
                    f"{alt.name or 'Alternative'} has {len(alt.values)} values "
                    f"for {len(self.criteria)} criteria"
                )
            elif any(math.isnan(v) for v in alt.values):
                errors.append(f"{alt.name or 'Alternative'} has missing values")
        return errors

    @property
    def is_complete(self) -> bool:
        return not self.validation_errors() and self.selected_method is not None

    def calculate_results(self, **params) -> List[RankedResult]:
        """
        Rank the alternatives with the selected method.

        Returns an empty list when no method is selected or there are no
        alternatives or criteria. Misaligned alternative values raise
        ``ValueError``.
        """
        if self.selected_method is None or not self.alternatives or not self.criteria:
            self.results = []
            return self.results

        misaligned = [a.name for a in self.alternatives
                      if len(a.values) != len(self.criteria)]
        if misaligned:
            raise ValueError(
                f"Alternatives {misaligned} do not have one value per criterion"
            )

        self.results = calculate_results(
            self.selected_method, self.alternatives, self.criteria, **params
        )
        return self.results

    # -----------------------------------------------------------------
    # Views
    # -----------------------------------------------------------------

    def to_frame(self) -> pd.DataFrame:
        """Decision matrix indexed by alternative name."""
        return pd.DataFrame(
            [list(a.values) for a in self.alternatives],
            index=pd.Index([a.name for a in self.alternatives], name='Alternative'),
            columns=[c.name for c in self.criteria],
        )

    def weights(self) -> Dict[str, float]:
        return {c.name: c.weight for c in self.criteria}

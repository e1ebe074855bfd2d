# -*- coding: utf-8 -*-
"""
AHP: Analytic Hierarchy Process
===============================

Derives criterion weights from a reciprocal pairwise comparison matrix
and checks the consistency of the judgements.

Mathematical Steps:
1. Normalize each column of A by its column sum
2. Priority vector w = row means of the normalized matrix
3. λmax = (1/n) Σ_j (A^T w)_j / w_j
4. CI = (λmax - n) / (n - 1)
5. CR = CI / RI(n), acceptable when CR <= 0.10

The row-mean priority vector approximates the principal eigenvector.
Step 3 weights each column of A by w and divides by that column's own
weight, so only uniform judgements (all weights equal) give λmax = n;
any matrix with n <= 2 has CR = 0 because RI is 0.

References
----------
Saaty, T.L. (1980). The Analytic Hierarchy Process. McGraw-Hill.
"""

import logging
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import get_config

logger = logging.getLogger(__name__)


# =========================================================================
# Pairwise comparison matrix
# =========================================================================

def create_pairwise_matrix(size: int) -> List[List[float]]:
    """All-ones ``size × size`` comparison matrix (every pair equal)."""
    return [[1.0] * size for _ in range(size)]


def update_pairwise_matrix(
    matrix: Sequence[Sequence[float]],
    row: int,
    col: int,
    value: float
) -> List[List[float]]:
    """
    Return a copy of ``matrix`` with ``[row][col] = value`` and
    ``[col][row] = 1 / value``.
    """
    pcm = PairwiseComparisonMatrix(matrix)
    pcm.set(row, col, value)
    return pcm.to_list()


class PairwiseComparisonMatrix:
    """
    Reciprocal pairwise comparison matrix.

    The diagonal is fixed at 1 and every update writes a cell together
    with its reciprocal, so the matrix is always a valid AHP input.

    Examples
    --------
    >>> pcm = PairwiseComparisonMatrix.create(3)
    >>> pcm.set(0, 1, 3)
    >>> pcm[1, 0]
    0.3333333333333333
    """

    def __init__(self, matrix: Optional[Sequence[Sequence[float]]] = None):
        self._values = np.array(matrix if matrix is not None else [], dtype=float)
        if self._values.size == 0:
            self._values = np.zeros((0, 0))
        if self._values.ndim != 2 or self._values.shape[0] != self._values.shape[1]:
            raise ValueError(
                f"Pairwise matrix must be square, got shape {self._values.shape}"
            )

    @classmethod
    def create(cls, size: int) -> 'PairwiseComparisonMatrix':
        return cls(create_pairwise_matrix(size))

    @property
    def size(self) -> int:
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        """Copy of the matrix entries."""
        return self._values.copy()

    def __getitem__(self, index: Tuple[int, int]) -> float:
        return float(self._values[index])

    def __len__(self) -> int:
        return self.size

    def set(self, row: int, col: int, value: float) -> None:
        """Set a judgement and its reciprocal in one step."""
        if row == col:
            raise ValueError("Diagonal entries of a pairwise matrix are fixed at 1")
        if not (np.isfinite(value) and value > 0):
            raise ValueError(f"Pairwise judgements must be positive and finite, got {value}")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.size}x{self.size} matrix"
            )
        self._values[row, col] = value
        self._values[col, row] = 1.0 / value

    def to_list(self) -> List[List[float]]:
        return self._values.tolist()

    def is_reciprocal(self, atol: float = 1e-9) -> bool:
        """Check the diagonal and reciprocity invariants."""
        A = self._values
        if A.size == 0:
            return True
        return bool(
            np.allclose(np.diag(A), 1.0, atol=atol)
            and np.allclose(A * A.T, 1.0, atol=atol)
        )


# =========================================================================
# AHP calculation
# =========================================================================

@dataclass
class AHPResult:
    """Result container for AHP calculation."""
    weights: np.ndarray                  # Priority vector (sums to 1)
    consistency_ratio: float             # CR
    is_consistent: bool                  # CR <= threshold
    lambda_max: float = 0.0              # Principal eigenvalue estimate
    consistency_index: float = 0.0       # CI
    random_index: float = 0.0            # RI used for CR
    details: Dict = field(default_factory=dict)

    @property
    def n(self) -> int:
        return len(self.weights)

    def summary(self) -> str:
        status = "acceptable" if self.is_consistent else "exceeds threshold"
        lines = [
            f"AHP priorities (n={self.n}):",
            *[f"  w{i + 1} = {w:.4f}" for i, w in enumerate(self.weights)],
            f"lambda_max = {self.lambda_max:.4f}, CI = {self.consistency_index:.4f}, "
            f"RI = {self.random_index:.2f}",
            f"CR = {self.consistency_ratio:.4f} ({status})",
        ]
        return "\n".join(lines)


class AHPCalculator:
    """
    AHP weight calculator with consistency checking.

    Parameters
    ----------
    consistency_threshold : float, optional
        Maximum acceptable CR (default from config, 0.10).
    random_index : dict, optional
        Random Index by matrix order (default Saaty's table for n <= 10).
    random_index_fallback : float, optional
        RI used for orders missing from the table (default 1.49).
    """

    def __init__(self,
                 consistency_threshold: Optional[float] = None,
                 random_index: Optional[Dict[int, float]] = None,
                 random_index_fallback: Optional[float] = None):
        cfg = get_config().ahp
        self.consistency_threshold = (
            cfg.consistency_threshold if consistency_threshold is None
            else consistency_threshold
        )
        self.random_index = dict(cfg.random_index if random_index is None
                                 else random_index)
        self.random_index_fallback = (
            cfg.random_index_fallback if random_index_fallback is None
            else random_index_fallback
        )

    def calculate(self, pairwise_matrix) -> AHPResult:
        """
        Calculate AHP weights and consistency ratio.

        Parameters
        ----------
        pairwise_matrix : array-like or PairwiseComparisonMatrix
            Square matrix of positive judgements.

        Returns
        -------
        AHPResult
        """
        if isinstance(pairwise_matrix, PairwiseComparisonMatrix):
            A = pairwise_matrix.values
        else:
            A = np.array(pairwise_matrix, dtype=float)
        n = A.shape[0] if A.ndim == 2 else 0

        if n == 0:
            return AHPResult(weights=np.zeros(0), consistency_ratio=0.0,
                             is_consistent=True)

        with np.errstate(divide='ignore', invalid='ignore'):
            # Step 1-2: column normalization
            col_sums = A.sum(axis=0)
            normalized = np.zeros_like(A)
            nz = col_sums != 0
            normalized[:, nz] = A[:, nz] / col_sums[nz]

            # Step 3: priority vector
            weights = normalized.mean(axis=1)

            # Step 4: lambda max (columns with zero priority contribute 0)
            weighted_sums = A.T @ weights
            ratios = np.zeros(n)
            wz = weights != 0
            ratios[wz] = weighted_sums[wz] / weights[wz]
            lambda_max = float(ratios.sum() / n)

        # Step 5-7: consistency
        ci = (lambda_max - n) / (n - 1) if n > 1 else 0.0
        ri = self.random_index.get(n, self.random_index_fallback)
        cr = 0.0 if ri == 0 else ci / ri
        is_consistent = bool(cr <= self.consistency_threshold)

        logger.debug(
            f"AHP n={n}: lambda_max={lambda_max:.4f}, CI={ci:.4f}, "
            f"RI={ri:.2f}, CR={cr:.4f}"
        )
        if not is_consistent:
            logger.info(
                f"AHP consistency ratio {cr:.3f} exceeds "
                f"{self.consistency_threshold:.2f}; judgements should be revised"
            )

        return AHPResult(
            weights=weights,
            consistency_ratio=float(cr),
            is_consistent=is_consistent,
            lambda_max=lambda_max,
            consistency_index=float(ci),
            random_index=float(ri),
            details={
                "column_sums": col_sums,
                "normalized_matrix": normalized,
            },
        )


def calculate_ahp(pairwise_matrix,
                  consistency_threshold: Optional[float] = None) -> AHPResult:
    """Convenience function for AHP weights."""
    calc = AHPCalculator(consistency_threshold=consistency_threshold)
    return calc.calculate(pairwise_matrix)

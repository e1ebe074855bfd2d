# -*- coding: utf-8 -*-
"""
Data Model for Decision Problems
================================

Criteria, alternatives and ranked results shared by every weighting
and ranking method in the package.
"""

import random
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence, Union

import numpy as np


class CriterionType(str, Enum):
    """Direction of a criterion."""
    BENEFIT = "benefit"   # higher is better
    COST = "cost"         # lower is better


Direction = Union[CriterionType, str]


def generate_id(length: int = 7) -> str:
    """Short random key for criteria and alternatives created without one."""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choice(alphabet) for _ in range(length))


@dataclass
class Criterion:
    """A weighted, directional evaluation criterion."""
    name: str
    type: CriterionType = CriterionType.BENEFIT
    weight: float = 0.0
    id: str = field(default_factory=generate_id)

    def __post_init__(self):
        self.type = CriterionType(self.type)

    @property
    def is_cost(self) -> bool:
        return self.type is CriterionType.COST


@dataclass
class Alternative:
    """An alternative with one raw value per criterion, in criterion order."""
    name: str
    values: List[float] = field(default_factory=list)
    id: str = field(default_factory=generate_id)


@dataclass
class RankedResult:
    """Score and 1-based rank of one alternative under one method."""
    alternative_id: str
    alternative_name: str
    score: float
    rank: int
    details: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'alternative_id': self.alternative_id,
            'alternative_name': self.alternative_name,
            'score': self.score,
            'rank': self.rank,
            'details': dict(self.details),
        }


def criterion_types(criteria: Sequence[Criterion]) -> List[CriterionType]:
    """Directions of ``criteria`` in order."""
    return [CriterionType(c.type) for c in criteria]


def criterion_weights(criteria: Sequence[Criterion]) -> np.ndarray:
    """Raw (not normalized) weights of ``criteria`` in order."""
    return np.array([c.weight for c in criteria], dtype=float)


def decision_matrix(alternatives: Sequence[Alternative],
                    n_criteria: int) -> np.ndarray:
    """
    Stack alternative values into a fresh (alternatives × criteria) array.

    The alternatives themselves are never modified; engines work on the
    returned copy.
    """
    if not alternatives:
        return np.zeros((0, n_criteria))
    return np.array([list(a.values) for a in alternatives], dtype=float)

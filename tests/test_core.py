# -*- coding: utf-8 -*-
"""
Core unit tests for mcdm-rank.

Tests cover:
- Configuration management
- Weight and decision-matrix normalization
- AHP weights, consistency ratio and the pairwise matrix
- Weighting modes (direct, equal, AHP)
- Ranking methods (WSM, WPM, WASPAS, TOPSIS, VIKOR) and dispatch
- Text export and output files
- Decision problem workflow
- Cross-method comparison
- Logging helpers
"""

import logging
import math
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))


def _two(values_a, values_b, types, weights=None):
    """Alternatives A and B on criteria C1..Cn."""
    from mcdm_rank.models import Alternative, Criterion
    n = len(types)
    weights = weights or [1.0 / n] * n
    criteria = [Criterion(f'C{j + 1}', t, w, id=f'c{j + 1}')
                for j, (t, w) in enumerate(zip(types, weights))]
    alternatives = [Alternative('A', list(values_a), id='a'),
                    Alternative('B', list(values_b), id='b')]
    return alternatives, criteria


class TestConfig:
    """Test configuration module."""

    def test_default_config_creation(self):
        from mcdm_rank.config import get_default_config
        config = get_default_config()
        assert config.waspas.lam == 0.5
        assert config.vikor.v == 0.5
        assert config.ahp.consistency_threshold == 0.10
        assert config.export.decimals == 4

    def test_random_index_table(self):
        from mcdm_rank.config import get_default_config
        ri = get_default_config().ahp.random_index
        assert ri[1] == 0.0 and ri[2] == 0.0
        assert ri[3] == 0.58
        assert ri[4] == 0.9
        assert ri[10] == 1.49

    def test_set_config_reaches_calculators(self):
        from mcdm_rank.config import get_default_config, set_config
        from mcdm_rank.mcdm import VIKORCalculator, WASPASCalculator

        config = get_default_config()
        config.vikor.v = 0.25
        config.waspas.lam = 0.8
        set_config(config)

        assert VIKORCalculator().v == 0.25
        assert WASPASCalculator().lam == 0.8

    def test_config_save(self, tmp_path):
        import json
        from mcdm_rank.config import get_default_config

        path = tmp_path / 'config.json'
        get_default_config().save(path)
        data = json.loads(path.read_text())
        assert data['vikor']['v'] == 0.5
        assert data['export']['header'] == ['Rank', 'Alternative', 'Score']

    def test_summary_mentions_parameters(self):
        from mcdm_rank.config import get_default_config
        summary = get_default_config().summary()
        assert 'VIKOR v parameter: 0.5' in summary
        assert 'Consistency threshold: 0.1' in summary


class TestModels:
    """Test criteria, alternatives and results."""

    def test_criterion_type_coercion(self):
        from mcdm_rank.models import Criterion, CriterionType
        c = Criterion('Price', 'cost', 0.3)
        assert c.type is CriterionType.COST
        assert c.is_cost

    def test_invalid_criterion_type(self):
        from mcdm_rank.models import Criterion
        with pytest.raises(ValueError):
            Criterion('Price', 'cheap')

    def test_generated_ids_are_distinct(self):
        from mcdm_rank.models import Alternative
        ids = {Alternative(f'A{i}').id for i in range(50)}
        assert len(ids) == 50

    def test_decision_matrix_is_a_copy(self, sample_alternatives):
        from mcdm_rank.models import decision_matrix
        X = decision_matrix(sample_alternatives, 3)
        X[0, 0] = -1.0
        assert sample_alternatives[0].values[0] == 0.8
        assert decision_matrix([], 3).shape == (0, 3)

    def test_result_to_dict(self):
        from mcdm_rank.models import RankedResult
        r = RankedResult('a', 'A', 0.5, 1, {'wsm': 0.5})
        d = r.to_dict()
        assert d['rank'] == 1
        assert d['details'] == {'wsm': 0.5}


class TestNormalization:
    """Test weight and decision-matrix normalization."""

    def test_normalize_weights(self):
        from mcdm_rank.weighting import normalize_weights
        w = normalize_weights([2, 1, 1])
        np.testing.assert_allclose(w, [0.5, 0.25, 0.25])

    def test_normalize_weights_all_zero(self):
        from mcdm_rank.weighting import normalize_weights
        np.testing.assert_allclose(normalize_weights([0, 0, 0, 0]), [0.25] * 4)

    def test_normalize_weights_empty(self):
        from mcdm_rank.weighting import normalize_weights
        assert normalize_weights([]).size == 0

    def test_normalize_weights_sum_to_one(self):
        from mcdm_rank.weighting import normalize_weights
        rng = np.random.RandomState(0)
        for _ in range(20):
            w = normalize_weights(rng.uniform(0, 5, size=rng.randint(1, 12)))
            assert abs(w.sum() - 1.0) < 1e-9

    def test_linear_normalize_benefit_and_cost(self):
        from mcdm_rank.weighting import linear_normalize
        X = np.array([[10.0, 10.0], [20.0, 20.0], [15.0, 15.0]])
        norm = linear_normalize(X, ['benefit', 'cost'])
        np.testing.assert_allclose(norm[:, 0], [0.0, 1.0, 0.5])
        np.testing.assert_allclose(norm[:, 1], [1.0, 0.0, 0.5])

    def test_linear_normalize_constant_column(self):
        from mcdm_rank.weighting import linear_normalize
        X = [[5.0, 1.0], [5.0, 2.0]]
        for direction in ('benefit', 'cost'):
            norm = linear_normalize(X, [direction, 'benefit'])
            np.testing.assert_allclose(norm[:, 0], [1.0, 1.0])

    def test_linear_normalize_does_not_modify_input(self):
        from mcdm_rank.weighting import linear_normalize
        X = np.array([[1.0, 4.0], [3.0, 2.0]])
        before = X.copy()
        linear_normalize(X, ['benefit', 'cost'])
        np.testing.assert_array_equal(X, before)

    def test_vector_normalize(self):
        from mcdm_rank.weighting import vector_normalize
        norm = vector_normalize([[3.0, 0.0], [4.0, 0.0]])
        np.testing.assert_allclose(norm, [[0.6, 0.0], [0.8, 0.0]])


class TestAHP:
    """Test AHP weights and consistency."""

    def test_row_mean_weights(self):
        from mcdm_rank.weighting import calculate_ahp
        A = [[1, 2, 4], [0.5, 1, 2], [0.25, 0.5, 1]]
        result = calculate_ahp(A)

        np.testing.assert_allclose(result.weights, [4 / 7, 2 / 7, 1 / 7])
        # column ratios 1.3125, 5.25 and 21
        assert result.lambda_max == pytest.approx(9.1875)
        assert result.consistency_index == pytest.approx(3.09375)
        assert result.random_index == 0.58
        assert result.consistency_ratio == pytest.approx(3.09375 / 0.58)
        assert not result.is_consistent

    def test_uniform_judgements(self):
        from mcdm_rank.weighting import calculate_ahp
        result = calculate_ahp(np.ones((4, 4)))
        np.testing.assert_allclose(result.weights, [0.25] * 4)
        assert result.lambda_max == pytest.approx(4.0)
        assert abs(result.consistency_ratio) < 1e-9
        assert result.is_consistent

    def test_weights_sum_to_one(self):
        from mcdm_rank.weighting import calculate_ahp
        A = [[1, 3, 5, 1], [1 / 3, 1, 2, 1 / 3],
             [1 / 5, 1 / 2, 1, 1 / 5], [1, 3, 5, 1]]
        result = calculate_ahp(A)
        assert abs(result.weights.sum() - 1.0) < 1e-9
        assert all(w > 0 for w in result.weights)

    def test_inconsistent_matrix(self):
        from mcdm_rank.weighting import calculate_ahp
        # A > B, B > C, but C > A strongly
        A = [[1, 9, 1 / 9], [1 / 9, 1, 9], [9, 1 / 9, 1]]
        result = calculate_ahp(A)
        assert result.consistency_ratio > 0.10
        assert not result.is_consistent

    def test_empty_matrix(self):
        from mcdm_rank.weighting import calculate_ahp
        result = calculate_ahp([])
        assert result.weights.size == 0
        assert result.consistency_ratio == 0.0
        assert result.is_consistent

    def test_single_criterion(self):
        from mcdm_rank.weighting import calculate_ahp
        result = calculate_ahp([[1]])
        np.testing.assert_allclose(result.weights, [1.0])
        assert result.consistency_index == 0.0
        assert result.consistency_ratio == 0.0
        assert result.is_consistent

    def test_two_criteria_always_consistent(self):
        from mcdm_rank.weighting import calculate_ahp
        result = calculate_ahp([[1, 3], [1 / 3, 1]])
        np.testing.assert_allclose(result.weights, [0.75, 0.25])
        assert result.consistency_ratio == 0.0
        assert result.is_consistent

    def test_random_index_fallback(self):
        from mcdm_rank.weighting import calculate_ahp
        result = calculate_ahp(np.ones((11, 11)))
        assert result.random_index == 1.49
        assert abs(result.consistency_ratio) < 1e-9
        np.testing.assert_allclose(result.weights, np.full(11, 1 / 11))

    def test_custom_threshold(self):
        from mcdm_rank.weighting import AHPCalculator
        A = [[1, 9, 1 / 9], [1 / 9, 1, 9], [9, 1 / 9, 1]]
        assert AHPCalculator(consistency_threshold=100).calculate(A).is_consistent

    def test_summary(self):
        from mcdm_rank.weighting import calculate_ahp
        summary = calculate_ahp([[1, 3], [1 / 3, 1]]).summary()
        assert 'w1 = 0.7500' in summary
        assert 'acceptable' in summary


class TestPairwiseMatrix:
    """Test the reciprocal comparison matrix."""

    def test_create(self):
        from mcdm_rank.weighting import create_pairwise_matrix
        assert create_pairwise_matrix(3) == [[1.0] * 3] * 3

    def test_set_writes_reciprocal(self):
        from mcdm_rank.weighting import PairwiseComparisonMatrix
        pcm = PairwiseComparisonMatrix.create(3)
        pcm.set(0, 1, 3)
        pcm.set(2, 0, 5)
        assert pcm[0, 1] == 3.0
        assert pcm[1, 0] == pytest.approx(1 / 3)
        assert pcm[0, 2] == pytest.approx(1 / 5)
        assert pcm.is_reciprocal()

    def test_diagonal_rejected(self):
        from mcdm_rank.weighting import PairwiseComparisonMatrix
        pcm = PairwiseComparisonMatrix.create(3)
        with pytest.raises(ValueError):
            pcm.set(1, 1, 3)

    def test_non_positive_rejected(self):
        from mcdm_rank.weighting import PairwiseComparisonMatrix
        pcm = PairwiseComparisonMatrix.create(3)
        with pytest.raises(ValueError):
            pcm.set(0, 1, 0)
        with pytest.raises(ValueError):
            pcm.set(0, 1, -2)

    def test_non_finite_rejected(self):
        from mcdm_rank.weighting import PairwiseComparisonMatrix, update_pairwise_matrix
        pcm = PairwiseComparisonMatrix.create(2)
        for value in (float('inf'), float('nan')):
            with pytest.raises(ValueError):
                pcm.set(0, 1, value)
        with pytest.raises(ValueError):
            update_pairwise_matrix([[1.0, 1.0], [1.0, 1.0]], 0, 1, float('inf'))
        assert pcm.to_list() == [[1.0, 1.0], [1.0, 1.0]]
        assert pcm.is_reciprocal()

    def test_out_of_bounds(self):
        from mcdm_rank.weighting import PairwiseComparisonMatrix
        with pytest.raises(IndexError):
            PairwiseComparisonMatrix.create(2).set(0, 2, 3)

    def test_non_square_rejected(self):
        from mcdm_rank.weighting import PairwiseComparisonMatrix
        with pytest.raises(ValueError):
            PairwiseComparisonMatrix([[1, 2, 3], [0.5, 1, 2]])

    def test_update_returns_new_matrix(self):
        from mcdm_rank.weighting import create_pairwise_matrix, update_pairwise_matrix
        original = create_pairwise_matrix(2)
        updated = update_pairwise_matrix(original, 0, 1, 4)
        assert original == [[1.0, 1.0], [1.0, 1.0]]
        assert updated == [[1.0, 4.0], [0.25, 1.0]]


class TestWeightingModes:
    """Test direct, equal and AHP weighting."""

    def test_direct(self, sample_criteria):
        from mcdm_rank.weighting import calculate_weights
        result = calculate_weights(sample_criteria, 'direct')
        assert result.weights == {'q': 0.4, 'p': 0.3, 's': 0.3}

    def test_equal(self, sample_criteria):
        from mcdm_rank.weighting import calculate_weights
        result = calculate_weights(sample_criteria, 'equal')
        np.testing.assert_allclose(result.as_array, [1 / 3] * 3)

    def test_ahp(self, sample_criteria):
        from mcdm_rank.weighting import calculate_weights
        A = [[1, 2, 4], [0.5, 1, 2], [0.25, 0.5, 1]]
        result = calculate_weights(sample_criteria, 'ahp', pairwise_matrix=A)
        assert result.method == 'ahp'
        assert result.weights['q'] == pytest.approx(4 / 7)
        assert result.details['consistency_ratio'] > 0
        assert 'is_consistent' in result.details

    def test_ahp_requires_matching_matrix(self, sample_criteria):
        from mcdm_rank.weighting import calculate_weights
        with pytest.raises(ValueError):
            calculate_weights(sample_criteria, 'ahp')
        with pytest.raises(ValueError):
            calculate_weights(sample_criteria, 'ahp', pairwise_matrix=[[1, 2], [0.5, 1]])

    def test_unknown_mode(self, sample_criteria):
        from mcdm_rank.weighting import calculate_weights
        with pytest.raises(ValueError):
            calculate_weights(sample_criteria, 'entropy')

    def test_apply_weights_copies(self, sample_criteria):
        from mcdm_rank.weighting.base import apply_weights
        updated = apply_weights(sample_criteria, [0.5, 0.5])
        assert [c.weight for c in updated] == [0.5, 0.5, 0.3]
        assert sample_criteria[0].weight == 0.4


class TestTraditionalMCDM:
    """Test the five ranking methods."""

    def test_wsm_tie_keeps_input_order(self):
        from mcdm_rank.mcdm import calculate_wsm
        alts, crits = _two([10, 0], [0, 10], ['benefit', 'benefit'], [0.5, 0.5])
        results = calculate_wsm(alts, crits)

        assert [r.alternative_name for r in results] == ['A', 'B']
        assert [r.rank for r in results] == [1, 2]
        assert results[0].score == pytest.approx(0.5)
        assert results[1].score == pytest.approx(0.5)

    def test_wsm_cost_criterion(self):
        from mcdm_rank.mcdm import calculate_wsm
        alts, crits = _two([10], [20], ['cost'], [1.0])
        results = calculate_wsm(alts, crits)
        assert results[0].alternative_name == 'A'
        assert results[0].score == pytest.approx(1.0)
        assert results[1].score == pytest.approx(0.0)

    def test_wsm_weights_are_renormalized(self):
        from mcdm_rank.mcdm import calculate_wsm
        alts, crits = _two([1, 4], [3, 2], ['benefit', 'cost'], [2.0, 2.0])
        alts2, crits2 = _two([1, 4], [3, 2], ['benefit', 'cost'], [0.5, 0.5])
        scores = [r.score for r in calculate_wsm(alts, crits)]
        scores2 = [r.score for r in calculate_wsm(alts2, crits2)]
        np.testing.assert_allclose(scores, scores2)

    def test_wpm(self):
        from mcdm_rank.mcdm import calculate_wpm
        alts, crits = _two([2, 4], [4, 4], ['benefit', 'cost'], [0.5, 0.5])
        results = calculate_wpm(alts, crits)
        assert results[0].alternative_name == 'B'
        assert results[0].score == pytest.approx(1.0)
        assert results[1].score == pytest.approx(math.sqrt(0.5))

    def test_wpm_zero_cost_value_does_not_raise(self):
        from mcdm_rank.mcdm import calculate_wpm
        alts, crits = _two([0], [1], ['cost'], [1.0])
        results = calculate_wpm(alts, crits)
        assert results[0].alternative_name == 'A'
        assert np.isinf(results[0].score)
        assert [r.rank for r in results] == [1, 2]

    def test_wpm_nan_score_ranks_last(self):
        from mcdm_rank.mcdm import calculate_wpm
        alts, crits = _two([-4, 1], [4, 1], ['benefit', 'benefit'], [0.5, 0.5])
        results = calculate_wpm(alts, crits)
        assert results[0].alternative_name == 'B'
        assert results[0].score == pytest.approx(2.0)
        assert math.isnan(results[1].score)
        assert results[1].rank == 2

    def test_waspas(self):
        from mcdm_rank.mcdm import calculate_waspas
        alts, crits = _two([2, 4], [4, 4], ['benefit', 'cost'], [0.5, 0.5])
        results = calculate_waspas(alts, crits)
        a = next(r for r in results if r.alternative_name == 'A')

        assert results[0].alternative_name == 'B'
        assert results[0].score == pytest.approx(1.0)
        assert a.details['wsm'] == pytest.approx(0.5)
        assert a.details['wpm'] == pytest.approx(math.sqrt(0.5))
        assert a.score == pytest.approx(0.25 + 0.5 * math.sqrt(0.5))

    def test_waspas_lambda_extremes(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_waspas, calculate_wsm

        wsm = {r.alternative_id: r.score for r in calculate_wsm(sample_alternatives, sample_criteria)}
        for r in calculate_waspas(sample_alternatives, sample_criteria, lam=1.0):
            assert r.score == pytest.approx(wsm[r.alternative_id])
        for r in calculate_waspas(sample_alternatives, sample_criteria, lam=0.0):
            assert r.score == pytest.approx(r.details['wpm'])

    def test_waspas_lambda_out_of_range(self):
        from mcdm_rank.mcdm import WASPASCalculator
        with pytest.raises(ValueError):
            WASPASCalculator(lam=1.5)

    def test_topsis(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_topsis
        results = calculate_topsis(sample_alternatives, sample_criteria)

        assert len(results) == 4
        assert all(0 <= r.score <= 1 for r in results)
        assert all({'s_plus', 's_minus'} <= set(r.details) for r in results)

    def test_topsis_cost_criterion(self):
        from mcdm_rank.mcdm import calculate_topsis
        alts, crits = _two([10], [20], ['cost'], [1.0])
        results = calculate_topsis(alts, crits)
        assert results[0].alternative_name == 'A'
        assert results[0].score == pytest.approx(1.0)
        assert results[0].details['s_plus'] == pytest.approx(0.0)
        assert results[1].score == pytest.approx(0.0)

    def test_topsis_identical_alternatives(self):
        from mcdm_rank.mcdm import calculate_topsis
        alts, crits = _two([1, 1], [1, 1], ['benefit', 'cost'])
        results = calculate_topsis(alts, crits)
        assert [r.score for r in results] == [0.0, 0.0]
        assert [r.alternative_name for r in results] == ['A', 'B']

    def test_vikor(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_vikor
        results = calculate_vikor(sample_alternatives, sample_criteria)

        q = [r.score for r in results]
        assert q == sorted(q)
        assert all({'S', 'R', 'Q'} <= set(r.details) for r in results)
        assert all(0 <= r.score <= 1 for r in results)
        assert results[0].score == pytest.approx(0.0)

    def test_vikor_cost_criterion(self):
        from mcdm_rank.mcdm import calculate_vikor
        alts, crits = _two([10], [20], ['cost'], [1.0])
        results = calculate_vikor(alts, crits)
        assert results[0].alternative_name == 'A'
        assert results[0].score == pytest.approx(0.0)
        assert results[1].details['S'] == pytest.approx(1.0)
        assert results[1].details['R'] == pytest.approx(1.0)
        assert results[1].score == pytest.approx(1.0)

    def test_vikor_constant_column(self):
        from mcdm_rank.mcdm import calculate_vikor
        alts, crits = _two([5, 5], [5, 5], ['benefit', 'cost'])
        results = calculate_vikor(alts, crits)
        assert [r.score for r in results] == [0.0, 0.0]
        assert [r.alternative_name for r in results] == ['A', 'B']

    def test_vikor_v_out_of_range(self):
        from mcdm_rank.mcdm import VIKORCalculator
        with pytest.raises(ValueError):
            VIKORCalculator(v=-0.1)

    def test_vikor_compromise(self):
        from mcdm_rank.mcdm import VIKORCalculator
        alts, crits = _two([10], [20], ['cost'], [1.0])
        calc = VIKORCalculator()
        comp = calc.compromise(calc.calculate(alts, crits))

        assert comp.compromise_solution == 'A'
        assert comp.advantage_condition
        assert comp.stability_condition
        assert comp.compromise_set == ['A']
        assert calc.compromise([]) is None

    def test_inputs_not_modified(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import MCDMMethod, calculate_results
        before = [list(a.values) for a in sample_alternatives]
        weights = [c.weight for c in sample_criteria]
        for method in MCDMMethod:
            calculate_results(method, sample_alternatives, sample_criteria)
        assert [list(a.values) for a in sample_alternatives] == before
        assert [c.weight for c in sample_criteria] == weights


class TestDispatch:
    """Test method registry and result contract."""

    def test_all_methods_registered(self):
        from mcdm_rank.mcdm import MCDMMethod, MCDM_METHODS, get_all_calculators
        assert set(get_all_calculators()) == set(MCDMMethod)
        assert set(MCDM_METHODS) == set(MCDMMethod)

    def test_string_and_enum_dispatch(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import MCDMMethod, calculate_results, calculate_topsis
        expected = [r.alternative_id for r in calculate_topsis(sample_alternatives, sample_criteria)]
        for method in ('topsis', MCDMMethod.TOPSIS):
            got = calculate_results(method, sample_alternatives, sample_criteria)
            assert [r.alternative_id for r in got] == expected

    def test_unknown_method(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_results
        with pytest.raises(ValueError):
            calculate_results('ahp', sample_alternatives, sample_criteria)

    def test_method_parameters(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import get_calculator
        assert get_calculator('vikor', v=0.3).v == 0.3
        assert get_calculator('waspas', lam=0.7).lam == 0.7

    def test_ranks_are_one_to_n(self, random_problem):
        from mcdm_rank.mcdm import MCDMMethod, calculate_results
        alternatives, criteria = random_problem
        for method in MCDMMethod:
            results = calculate_results(method, alternatives, criteria)
            assert [r.rank for r in results] == list(range(1, len(alternatives) + 1))
            assert {r.alternative_id for r in results} == {a.id for a in alternatives}

    def test_sort_direction(self, random_problem):
        from mcdm_rank.mcdm import MCDMMethod, calculate_results
        alternatives, criteria = random_problem
        for method in MCDMMethod:
            scores = [r.score for r in calculate_results(method, alternatives, criteria)]
            if method is MCDMMethod.VIKOR:
                assert scores == sorted(scores)
            else:
                assert scores == sorted(scores, reverse=True)

    def test_empty_inputs(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import MCDMMethod, calculate_results
        for method in MCDMMethod:
            assert calculate_results(method, [], sample_criteria) == []
            assert calculate_results(method, sample_alternatives, []) == []

    def test_single_alternative(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import MCDMMethod, calculate_results
        for method in MCDMMethod:
            results = calculate_results(method, sample_alternatives[:1], sample_criteria)
            assert len(results) == 1
            assert results[0].rank == 1


class TestExport:
    """Test text export and result files."""

    def test_export_format(self):
        from mcdm_rank.mcdm import calculate_wsm
        from mcdm_rank.output_manager import export_to_table
        alts, crits = _two([10, 0], [0, 10], ['benefit', 'benefit'], [0.5, 0.5])
        text = export_to_table(calculate_wsm(alts, crits), 'WSM')
        assert text == "WSM Results\n\nRank,Alternative,Score\n1,A,0.5000\n2,B,0.5000"

    def test_export_rows_parse_back(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_topsis
        from mcdm_rank.output_manager import export_to_table
        results = calculate_topsis(sample_alternatives, sample_criteria)
        lines = export_to_table(results, 'TOPSIS').split("\n")

        assert lines[0] == 'TOPSIS Results'
        assert lines[1] == ''
        assert lines[2] == 'Rank,Alternative,Score'
        for line, r in zip(lines[3:], results):
            rank, name, score = line.split(',')
            assert int(rank) == r.rank
            assert name == r.alternative_name
            assert abs(float(score) - r.score) <= 5e-5

    def test_export_empty(self):
        from mcdm_rank.output_manager import export_to_table
        assert export_to_table([], 'VIKOR') == "VIKOR Results\n\nRank,Alternative,Score"

    def test_export_default_label(self):
        from mcdm_rank.config import get_default_config, set_config
        from mcdm_rank.output_manager import export_to_table
        assert export_to_table([]).startswith("MCDM Results\n")

        config = get_default_config()
        config.export.default_label = 'Supplier ranking'
        set_config(config)
        assert export_to_table([]).splitlines()[0] == 'Supplier ranking Results'

    def test_results_to_frame(self, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_vikor
        from mcdm_rank.output_manager import results_to_frame
        df = results_to_frame(calculate_vikor(sample_alternatives, sample_criteria))
        assert list(df.columns[:3]) == ['Rank', 'Alternative', 'Score']
        assert {'S', 'R', 'Q'} <= set(df.columns)
        assert len(df) == 4
        assert list(results_to_frame([]).columns) == ['Rank', 'Alternative', 'Score']

    def test_output_manager(self, tmp_path, sample_alternatives, sample_criteria):
        from mcdm_rank.mcdm import calculate_wsm, calculate_vikor
        from mcdm_rank.output_manager import OutputManager, export_to_table

        manager = OutputManager(base_output_dir=str(tmp_path))
        wsm = calculate_wsm(sample_alternatives, sample_criteria)
        path = Path(manager.save_results(wsm, 'WSM', 'Laptop choice'))

        assert path.name == 'Laptop_choice_results.csv'
        assert path.read_text(encoding='utf-8') == export_to_table(wsm, 'WSM')

        paths = manager.save_all({'WSM': wsm,
                                  'VIKOR': calculate_vikor(sample_alternatives, sample_criteria)},
                                 'Laptop choice')
        assert len(paths) == 2
        vikor = pd.read_csv(paths[1])
        assert Path(paths[1]).name == 'Laptop_choice_vikor_details.csv'
        assert list(vikor['Rank']) == [1, 2, 3, 4]


class TestDecisionProblem:
    """Test the decision problem workflow."""

    def _problem(self):
        from mcdm_rank.problem import DecisionProblem
        problem = DecisionProblem('Supplier', n_alternatives=3, n_criteria=2)
        problem.initialize()
        problem.update_criterion(1, name='Cost', type='cost')
        for i, values in enumerate([[7, 300], [9, 450], [6, 200]]):
            problem.update_alternative(i, values=values)
        return problem

    def test_initialize_defaults(self):
        from mcdm_rank.problem import DecisionProblem
        problem = DecisionProblem('P', n_alternatives=3, n_criteria=4)
        problem.initialize()

        assert [c.name for c in problem.criteria][0] == 'Criterion 1'
        assert all(c.weight == 0.25 for c in problem.criteria)
        assert [a.name for a in problem.alternatives][-1] == 'Alternative 3'
        assert all(a.values == [0.0] * 4 for a in problem.alternatives)
        assert problem.ahp_matrix.size == 4
        assert problem.validation_errors() == []

    def test_validation_errors(self):
        from mcdm_rank.problem import DecisionProblem
        problem = DecisionProblem('', n_alternatives=1, n_criteria=2)
        problem.initialize()
        problem.update_weights([0.2, 0.2])
        errors = problem.validation_errors()

        assert 'Project name is required' in errors
        assert 'At least 2 alternatives are required' in errors
        assert 'Weights must sum to 100% (currently 40.0%)' in errors

    def test_missing_value_flagged(self):
        problem = self._problem()
        problem.set_value(0, 1, float('nan'))
        assert any('missing values' in e for e in problem.validation_errors())

    def test_equal_weighting(self):
        problem = self._problem()
        problem.update_weights([0.9, 0.1])
        problem.set_weighting_mode('equal')
        assert [c.weight for c in problem.criteria] == [0.5, 0.5]

    def test_ahp_weighting(self):
        problem = self._problem()
        problem.set_weighting_mode('ahp')
        problem.set_pairwise(0, 1, 3)
        result = problem.apply_ahp()

        assert result.is_consistent
        assert problem.weights() == pytest.approx({'Criterion 1': 0.75, 'Cost': 0.25})

    def test_calculate_results(self):
        problem = self._problem()
        assert problem.calculate_results() == []
        assert not problem.is_complete

        problem.select_method('topsis')
        results = problem.calculate_results()
        assert problem.is_complete
        assert len(results) == 3
        assert problem.results is results

    def test_misaligned_values(self):
        problem = self._problem()
        problem.select_method('wsm')
        problem.update_alternative(0, values=[1.0])
        with pytest.raises(ValueError):
            problem.calculate_results()

    def test_to_frame(self):
        df = self._problem().to_frame()
        assert df.shape == (3, 2)
        assert list(df.columns) == ['Criterion 1', 'Cost']
        assert df.loc['Alternative 2', 'Cost'] == 450


class TestComparison:
    """Test rank agreement across methods."""

    def test_identical_rankings(self, sample_alternatives, sample_criteria):
        from mcdm_rank.analysis import compare_rankings
        from mcdm_rank.mcdm import calculate_topsis
        results = calculate_topsis(sample_alternatives, sample_criteria)
        comparison = compare_rankings(results, results, 'TOPSIS', 'TOPSIS2')

        assert comparison['spearman_correlation'] == pytest.approx(1.0)
        assert comparison['mean_rank_difference'] == 0.0
        assert comparison['max_rank_difference'] == 0
        assert 'TOPSIS_Rank' in comparison['comparison_df'].columns

    def test_reversed_rankings(self):
        from mcdm_rank.analysis import compare_rankings
        from mcdm_rank.models import RankedResult
        a = [RankedResult(f'x{i}', f'X{i}', 0.0, i + 1) for i in range(4)]
        b = [RankedResult(f'x{i}', f'X{i}', 0.0, 4 - i) for i in range(4)]
        comparison = compare_rankings(a, b)
        assert comparison['spearman_correlation'] == pytest.approx(-1.0)
        assert comparison['max_rank_difference'] == 3

    def test_compare_all_methods(self, sample_alternatives, sample_criteria):
        from mcdm_rank.analysis import compare_all_methods
        df = compare_all_methods(sample_alternatives, sample_criteria)

        assert list(df.columns) == ['WSM', 'WPM', 'WASPAS', 'TOPSIS', 'VIKOR']
        assert list(df.index) == ['P1', 'P2', 'P3', 'P4']
        for column in df.columns:
            assert sorted(df[column]) == [1, 2, 3, 4]


class TestLogger:
    """Test logging helpers."""

    def test_setup_logger(self):
        from mcdm_rank.logger import LOG_NAME, LoggerFactory, get_module_logger, setup_logger
        LoggerFactory.reset()
        logger = setup_logger(console=False)

        assert logger.name == LOG_NAME
        assert get_module_logger('mcdm.topsis').name == 'mcdm_rank.mcdm.topsis'
        LoggerFactory.reset()

    def test_debug_file(self, tmp_path):
        from mcdm_rank.logger import LoggerFactory, setup_logger
        LoggerFactory.reset()
        log_file = tmp_path / 'logs' / 'debug.log'
        logger = setup_logger(console=False, debug_file=log_file)
        logger.debug('ranking started')
        for handler in logger.handlers:
            handler.flush()

        assert 'ranking started' in log_file.read_text(encoding='utf-8')
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        LoggerFactory.reset()

    def test_colors_strip(self):
        from mcdm_rank.logger import Colors
        assert Colors.strip(f"{Colors.RED}error{Colors.RESET}") == 'error'

    def test_log_execution(self, caplog):
        from mcdm_rank.logger import log_execution
        log = logging.getLogger('tests.execution')

        @log_execution(logger=log, level=logging.INFO)
        def add(a, b):
            return a + b

        with caplog.at_level(logging.INFO, logger='tests.execution'):
            assert add(1, 2) == 3
        assert 'add completed' in caplog.text

    def test_log_execution_reraises(self, caplog):
        from mcdm_rank.logger import log_execution
        log = logging.getLogger('tests.execution')

        @log_execution(logger=log)
        def fail():
            raise ValueError('bad input')

        with caplog.at_level(logging.ERROR, logger='tests.execution'):
            with pytest.raises(ValueError, match='bad input'):
                fail()
        assert 'failed' in caplog.text

    def test_timed_operation(self, caplog):
        from mcdm_rank.logger import timed_operation
        log = logging.getLogger('tests.timing')
        with caplog.at_level(logging.INFO, logger='tests.timing'):
            with timed_operation(log, 'ranking'):
                pass
        assert 'Starting: ranking' in caplog.text
        assert 'Finished: ranking' in caplog.text

    def test_logging_follows_config(self, tmp_path):
        from main import configure_logging
        from mcdm_rank.config import get_default_config, set_config
        from mcdm_rank.logger import LoggerFactory

        config = get_default_config()
        config.paths.base_dir = tmp_path
        config.logging.level = 'WARNING'
        set_config(config)
        LoggerFactory.reset()

        logger = configure_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert logger.handlers[0].level == logging.WARNING
        assert not (tmp_path / 'outputs').exists()

        logger = configure_logging(debug=True)
        logger.debug('weights applied')
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / 'outputs' / 'logs' / 'debug.log'
        assert 'weights applied' in log_file.read_text(encoding='utf-8')
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        LoggerFactory.reset()


class TestIntegration:
    """End-to-end workflow."""

    def test_sample_problem(self):
        from main import build_sample_problem
        from mcdm_rank import MCDMMethod, export_to_table

        problem = build_sample_problem(use_ahp=True)
        assert problem.ahp_result is not None
        assert abs(sum(problem.weights().values()) - 1.0) < 1e-9
        assert problem.validation_errors() == []

        for method in MCDMMethod:
            problem.select_method(method)
            results = problem.calculate_results()
            assert [r.rank for r in results] == [1, 2, 3, 4]
            text = export_to_table(results, method.value.upper())
            assert len(text.split("\n")) == 7

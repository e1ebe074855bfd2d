#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
MCDM Ranking: Main Entry Point
===============================

Usage
-----
    python main.py                 # rank the sample problem with every method
    python main.py topsis          # one method: wsm, wpm, waspas, topsis, vikor
    python main.py --ahp           # derive weights with AHP first
    python main.py --export        # also write CSV files to outputs/results/
    python main.py --debug         # also write outputs/logs/debug.log

Steps
-----
1. Sample problem   – four laptops, four criteria (built in)
2. Weighting        – direct weights, or AHP with consistency check
3. Ranking          – selected method(s)
4. Comparison       – rank agreement across methods
5. Export           – CSV text per method (optional)
"""

import sys


def build_sample_problem(use_ahp: bool = False):
    """Laptop selection: four alternatives on four criteria."""
    from mcdm_rank import DecisionProblem

    problem = DecisionProblem("Laptop selection", n_alternatives=4, n_criteria=4)
    problem.initialize()

    for i, (name, ctype, weight) in enumerate([
        ("Performance", "benefit", 0.35),
        ("Battery (h)", "benefit", 0.20),
        ("Weight (kg)", "cost", 0.15),
        ("Price", "cost", 0.30),
    ]):
        problem.update_criterion(i, name=name, type=ctype, weight=weight)

    for i, (name, values) in enumerate([
        ("Aurora 14", [8.5, 10.0, 1.4, 1299.0]),
        ("Breeze 13", [7.0, 14.0, 1.1, 999.0]),
        ("Cobalt 16", [9.5, 6.0, 2.1, 1899.0]),
        ("Drift 15", [6.5, 9.0, 1.7, 749.0]),
    ]):
        problem.update_alternative(i, name=name, values=values)

    if use_ahp:
        problem.set_weighting_mode("ahp")
        # Performance vs others, then Price vs the rest
        problem.set_pairwise(0, 1, 3)
        problem.set_pairwise(0, 2, 5)
        problem.set_pairwise(0, 3, 1)
        problem.set_pairwise(3, 1, 3)
        problem.set_pairwise(3, 2, 5)
        problem.set_pairwise(1, 2, 2)
        problem.apply_ahp()

    return problem


def configure_logging(debug: bool = False):
    """
    Package logger from the logging configuration.

    ``debug`` writes a full debug log to ``<output>/logs/debug.log`` unless
    the configuration already names a debug file.
    """
    from mcdm_rank import get_config, setup_logger

    config = get_config()
    debug_file = config.logging.debug_file
    if debug and debug_file is None:
        config.paths.ensure_directories()
        debug_file = config.paths.logs_dir / "debug.log"
    return setup_logger(level=config.logging.level, debug_file=debug_file)


def main():
    """Configure and rank the sample decision problem."""

    # ------------------------------------------------------------------
    # Determine run mode
    # ------------------------------------------------------------------
    args = [a for a in sys.argv[1:] if not a.startswith('--')]
    use_ahp = '--ahp' in sys.argv
    export = '--export' in sys.argv
    debug = '--debug' in sys.argv

    from mcdm_rank import (
        MCDMMethod, MCDM_METHODS, OutputManager,
        compare_all_methods, export_to_table,
    )
    from mcdm_rank.logger import log_ranking, timed_operation

    logger = configure_logging(debug=debug)

    try:
        methods = [MCDMMethod(args[0].lower())] if args else list(MCDMMethod)
    except ValueError:
        valid = ", ".join(m.value for m in MCDMMethod)
        print(f"\n  ERROR: unknown method '{args[0]}' (choose from {valid})")
        sys.exit(2)

    problem = build_sample_problem(use_ahp=use_ahp)

    # ------------------------------------------------------------------
    # Banner
    # ------------------------------------------------------------------
    print(f"\n{'='*60}")
    print(f"  MCDM: {problem.project_name}")
    print(f"{'='*60}")
    print(f"  Alternatives : {len(problem.alternatives)}")
    print(f"  Criteria     : {len(problem.criteria)}")
    print(f"  Weighting    : {problem.weighting_mode.value}")
    print(f"  Methods      : {', '.join(MCDM_METHODS[m].name for m in methods)}")
    if problem.ahp_result is not None:
        print(f"  AHP CR       : {problem.ahp_result.consistency_ratio:.4f} "
              f"({'consistent' if problem.ahp_result.is_consistent else 'inconsistent'})")
    print(f"{'='*60}\n")

    errors = problem.validation_errors()
    if errors:
        for e in errors:
            logger.warning(e)
        sys.exit(1)

    # ------------------------------------------------------------------
    # Execute
    # ------------------------------------------------------------------
    all_results = {}
    with timed_operation(logger, "ranking"):
        for method in methods:
            problem.select_method(method)
            results = problem.calculate_results()
            label = MCDM_METHODS[method].name
            all_results[label] = results
            log_ranking(logger, results, title=label)

    for label, results in all_results.items():
        print()
        print(export_to_table(results, label))

    if len(methods) > 1:
        print(f"\n{'='*60}")
        print("  RANKS BY METHOD")
        print(f"{'='*60}")
        print(compare_all_methods(problem.alternatives, problem.criteria,
                                  methods).to_string())

    if export:
        manager = OutputManager()
        for label, results in all_results.items():
            manager.save_results(results, label, f"{problem.project_name}_{label}")
        manager.save_all(all_results, problem.project_name)
        print(f"\n  Results saved to {manager.results_dir}/")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Experiment runner script for threaded AVL trees.

Runs the prefix aggregate experiment and/or the insertion experiment and
prints the resulting tables. Times are nanoseconds per operation.
"""

import argparse
import logging
import sys

from avl_trees.logging_config import get_logger, set_log_level
from benchmarks.benchmark_utils import BenchmarkUtils
from benchmarks.config import BenchmarkConfig, BenchmarkMetadata, get_git_commit_hash
from benchmarks.experiments import (
    format_insert_table,
    format_prefix_table,
    insert_experiment,
    prefix_experiment,
)

logger = get_logger("Experiments")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run timing experiments for AVL trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_experiments.py                   # Both experiments
  python run_experiments.py --prefix          # Prefix aggregate experiment only
  python run_experiments.py --insert --rounds 3
        """
    )
    parser.add_argument('--prefix', action='store_true',
                        help='Run the prefix aggregate experiment')
    parser.add_argument('--insert', action='store_true',
                        help='Run the AVL vs. BST insertion experiment')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds (sizes step * 1 .. step * rounds)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--no-progress', action='store_true',
                        help='Disable progress bars')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='Set the logging level (default: INFO)'
    )
    args = parser.parse_args(argv)

    config = BenchmarkConfig.from_env()
    if args.rounds is not None:
        config.rounds = args.rounds
    if args.seed is not None:
        config.seed = args.seed
    if args.no_progress:
        config.show_progress = False
    if args.log_level is not None:
        config.log_level = args.log_level

    set_log_level(getattr(logging, config.log_level))
    BenchmarkUtils.check_logging_level()

    run_prefix = args.prefix or not args.insert
    run_insert = args.insert or not args.prefix

    metadata = BenchmarkMetadata(commit_hash=get_git_commit_hash(), config=config)
    for line in str(metadata).splitlines():
        logger.info(line)

    if run_prefix:
        rows = prefix_experiment(config)
        logger.info("")
        logger.info("Prefix aggregate (ns per query):")
        for line in format_prefix_table(rows, config.head_count).splitlines():
            logger.info(line)

    if run_insert:
        rows = insert_experiment(config)
        logger.info("")
        logger.info("Insert (ns per insert):")
        for line in format_insert_table(rows).splitlines():
            logger.info(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())

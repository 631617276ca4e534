#!/usr/bin/env python3
"""
cli.py
------
Command line entry point for the breach consequence analysis.

USAGE (examples):
  # 1) Write a synthetic dataset
  python -m breach_risk generate --out breach_scenarios.csv --rows 100 --seed 42

  # 2) Fit the risk model, report RMSE and the canonical response scenarios
  python -m breach_risk analyze --data breach_scenarios.csv --seed 42 --train-fraction 0.8

Any pipeline error is logged with the failing stage and exits with status 1.
"""

import argparse
import logging

from .config import AnalysisConfig
from .errors import BreachRiskError
from .generator import BreachDataGenConfig, write_breach_data
from .pipeline import format_report, run_analysis


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="breach-risk",
                                 description="Political risk model for hypothetical breach scenarios")
    ap.add_argument("--log-level", type=str, default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Set the logging level (default: INFO)")
    sub = ap.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Fit the model and print coefficients, RMSE and scenarios.")
    analyze.add_argument("--data", dest="data_path", required=True, help="Input CSV with one row per scenario.")
    analyze.add_argument("--seed", type=int, default=42, help="Train/test split seed.")
    analyze.add_argument("--train-fraction", type=float, default=0.8, help="Share of rows used for fitting.")

    generate = sub.add_parser("generate", help="Write a synthetic breach-consequence dataset.")
    generate.add_argument("--out", dest="out_path", required=True, help="Output CSV path.")
    generate.add_argument("--rows", type=int, default=100, help="Number of rows.")
    generate.add_argument("--seed", type=int, default=42, help="Random seed.")
    generate.add_argument("--noise-sd", type=float, default=4.0,
                          help="Noise SD for the risk score (higher = noisier).")
    generate.add_argument("--inject-data-issues", action="store_true",
                          help="Plant a few invalid values (for validation exercises).")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s: %(message)s'
    )

    try:
        if args.command == "generate":
            cfg = BreachDataGenConfig(
                n_rows=args.rows,
                seed=args.seed,
                noise_scale=args.noise_sd,
                inject_data_issues=args.inject_data_issues,
            )
            write_breach_data(cfg, args.out_path)
            print(f"Wrote: {args.out_path}")
            return 0

        config = AnalysisConfig(
            data_path=args.data_path,
            seed=args.seed,
            train_fraction=args.train_fraction,
        )
        report = run_analysis(config)
    except BreachRiskError as exc:
        logging.error(f"Analysis aborted: {exc}")
        return 1
    except (OSError, ValueError) as exc:
        logging.error(f"{type(exc).__name__}: {exc}")
        return 1

    print(format_report(report))
    return 0

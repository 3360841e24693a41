"""Stock holdings tracker CLI.

Provides commands for:
- demo: Run the built-in buy/sell walkthrough
- run: Run a YAML scenario of buy/sell/print steps
"""
from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

import pandas as pd

from common.config_loader import DEFAULT_SCENARIO_PATH, load_scenario
from common.logging_config import configure_logging
from engine.operations import OperationError
from engine.scenario import DEMO_STEPS, ScenarioError, ScenarioRun, run_scenario
from reporting.summary import holdings_frame, portfolio_summary


def print_table(run: ScenarioRun) -> None:
    """Print final holdings as a table with weights."""
    df = holdings_frame(run.portfolio)
    print("\nHoldings:")
    print("=" * 50)
    if df.empty:
        print("  (no holdings)")
    else:
        with pd.option_context("display.float_format", "{:,.2f}".format):
            print(df.to_string(index=False))

    summary = portfolio_summary(run.portfolio)
    print("-" * 50)
    print(f"  total_value: ${summary['total_value']:,.2f}")
    print(f"  holdings: {summary['holdings']}")
    if run.rejected:
        print(f"  rejected trades: {len(run.rejected)}")


def _run_steps(steps: List[Dict[str, Any]], table: bool) -> int:
    try:
        run = run_scenario(steps)
    except (ScenarioError, OperationError) as e:
        print(f"Error: {e}")
        return 1

    if table:
        print_table(run)
    return 0


def cmd_demo(args) -> int:
    """Handle demo command: built-in worked example."""
    return _run_steps(DEMO_STEPS, args.table)


def cmd_run(args) -> int:
    """Handle run command: scenario file."""
    try:
        steps = load_scenario(args.scenario)
    except FileNotFoundError:
        print(f"Error: Scenario file not found: {args.scenario}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return _run_steps(steps, args.table)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    p = argparse.ArgumentParser(
        prog="cli.main",
        description="Stock holdings tracker: buy, sell and value an in-memory portfolio",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Diagnostic log level (default: $LOG_LEVEL or WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for all commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--table", action="store_true", help="Print final holdings table")

    # Demo command
    demo = sub.add_parser("demo", parents=[common], help="Run the built-in walkthrough")
    demo.set_defaults(func=cmd_demo)

    # Run command
    run = sub.add_parser("run", parents=[common], help="Run a scenario file")
    run.add_argument(
        "--scenario",
        default=DEFAULT_SCENARIO_PATH,
        help="Scenario YAML file",
    )
    run.set_defaults(func=cmd_run)

    args = p.parse_args(argv)
    configure_logging(args.log_level)
    raise SystemExit(args.func(args))


if __name__ == "__main__":
    main()

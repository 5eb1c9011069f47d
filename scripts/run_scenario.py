"""CLI for running offline elevator scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, Optional

from simulation import logging_config
from simulation.scenario import build_controller, run_scenario


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the status trace and metrics as JSON",
    )
    parser.add_argument("--log-level", help="Enable console logging at this level")
    args = parser.parse_args()

    if args.log_level:
        logging_config.enable_console_logging(level=args.log_level.upper())
    else:
        logging_config.configure_from_env()

    config = json.loads(args.config.read_text())
    config.setdefault("name", args.config.stem)
    controller = build_controller(config)
    results = run_scenario(controller, config)

    save_results(args.output, results)

    final = results["final_status"]
    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Completed: {'yes' if results['completed'] else 'no'} after {results['ticks']} ticks")
    print(f"Delivered: {final['total_processed']}/{final['total_registered']}")
    print("Final metrics:")
    for key, value in results["final_metrics"].items():
        print(f"  {key}: {value}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()

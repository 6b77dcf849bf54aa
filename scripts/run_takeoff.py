"""
Run a takeoff over a saved analysis reply and print the report.

Reads the text returned by the text-generation service for a blueprint
set and prints the summary report, or the JSON output structure.

Usage:
  python scripts/run_takeoff.py --trade plumbing --input reply.txt
  python scripts/run_takeoff.py --trade acoustical --input reply.txt --json --waste 12
  python scripts/run_takeoff.py --trade mechanical --prompt --analysis-type costs
"""

import argparse
import json
import sys

from takeoff.config.errors import TakeoffError
from takeoff.models.analysis import AnalysisConfig, AnalysisType
from takeoff.models.records import Trade
from takeoff.services.prompt_builder import PromptBuilder
from takeoff.services.report_generator import SummaryReportGenerator
from takeoff.services.takeoff_pipeline import TakeoffPipeline
from takeoff.utils.pipeline_logger import configure_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Run a blueprint takeoff over analysis text")
    parser.add_argument("--trade", required=True, choices=[trade.value for trade in Trade], help="Trade to estimate")
    parser.add_argument("--input", required=False, help="Analysis text file (defaults to stdin)")
    parser.add_argument(
        "--analysis-type",
        default=AnalysisType.FULL.value,
        choices=[analysis_type.value for analysis_type in AnalysisType],
        help="Depth of the analysis",
    )
    parser.add_argument("--waste", type=float, required=False, help="Waste factor percent (trade default if omitted)")
    parser.add_argument("--contingency", type=float, required=False, help="Contingency rate as a fraction (e.g. 0.10)")
    parser.add_argument("--scale", required=False, help="Drawing scale passed to the prompt")
    parser.add_argument("--json", action="store_true", help="Print the JSON output structure instead of the report")
    parser.add_argument("--prompt", action="store_true", help="Print the analysis prompt for the trade and exit")
    parser.add_argument("--log-level", required=False, help="Log level (defaults to TAKEOFF_LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)

    options = {"analysis_type": AnalysisType(args.analysis_type), "project_scale": args.scale}
    if args.waste is not None:
        options["waste_factor_pct"] = args.waste
    if args.contingency is not None:
        options["contingency_rate"] = args.contingency
    config = AnalysisConfig(**options)

    if args.prompt:
        print(PromptBuilder().build(args.trade, config))
        return 0

    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    try:
        result = TakeoffPipeline().analyze(text, args.trade, config)
    except TakeoffError as e:
        print(json.dumps(e.to_dict(), indent=2))
        return 2

    if args.json:
        print(json.dumps(result.to_output(), indent=2))
    else:
        print(SummaryReportGenerator().render(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

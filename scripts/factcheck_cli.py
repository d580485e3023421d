"""
Fact-check CLI: command-line interface for the analysis pipeline.

Reads text from an argument, a file or stdin, runs the six-stage pipeline
and prints the report as text or JSON.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging
from typing import List, Optional

from factcheck.api import create_factcheck_api
from factcheck.config import FactCheckConfig
from factcheck.core.sampling import RandomSampler
from factcheck.errors import InvalidInputError, KnowledgeBaseError
from factcheck.integration.result_formatter import ResultFormatter
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Fact-check free-form text against the evidence knowledge base',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/factcheck_cli.py "According to a new study, global temperatures have risen 1.1 degrees."
  python scripts/factcheck_cli.py --file article.txt --json
  echo "Reports claim the vaccine data is wrong." | python scripts/factcheck_cli.py
  python scripts/factcheck_cli.py --knowledge-base kb.json --reference-year 2026 "..."
        """
    )
    parser.add_argument('text', nargs='?', help='Text to analyze (reads stdin when omitted)')
    parser.add_argument('--file', '-f', help='Read the text from a file')
    parser.add_argument('--json', action='store_true', help='Print the full report as JSON')
    parser.add_argument('--knowledge-base', '-k', help='JSON knowledge base to use instead of the seed topics')
    parser.add_argument('--reference-year', type=int, help='Year used for source recency scoring')
    parser.add_argument('--seed', type=int, help='Seed for the placeholder scores')
    parser.add_argument('--random', action='store_true', help='Use random placeholder scores (seeded by --seed when given)')
    parser.add_argument('--progress', action='store_true', help='Print stage progress to stderr')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def _read_text(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding='utf-8')
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _build_config(args) -> FactCheckConfig:
    config = FactCheckConfig.from_env()
    overrides = config.to_dict()
    if args.reference_year is not None:
        overrides['reference_year'] = args.reference_year
    if args.seed is not None:
        overrides['sampler_seed'] = args.seed
    if args.knowledge_base:
        overrides['knowledge_base_path'] = args.knowledge_base
    if args.verbose:
        overrides['log_level'] = 'DEBUG'
    return FactCheckConfig.from_dict(overrides)


def _print_progress(stage: str, percent: int) -> None:
    print(f"[{percent:3d}%] {stage}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _build_config(args)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(level=config.log_level if args.verbose else 'WARNING')

    try:
        # The pipeline loads config.knowledge_base_path itself when set
        sampler = RandomSampler(args.seed) if args.random else None
        api = create_factcheck_api(config=config, sampler=sampler)
    except KnowledgeBaseError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        text = _read_text(args)
    except OSError as e:
        print(f"❌ Cannot read input: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        report = api.analyze(text, on_stage=_print_progress if args.progress else None)
    except InvalidInputError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(report.to_json())
    else:
        print(ResultFormatter().format_report(report))

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())

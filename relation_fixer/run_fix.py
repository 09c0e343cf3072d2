"""Orchestration logic for fixing relations in a doclet dump."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from relation_fixer.fix_relations import fix_relations
from relation_fixer.load_config import load_config
from relation_fixer.load_doclets import load_doclets
from relation_fixer.relation_cycle_error import RelationCycleError
from relation_fixer.relation_report import RelationReport

logger = logging.getLogger(__name__)


def run_fix(args: argparse.Namespace) -> int:
    """Execute the full relation fixing pipeline."""
    if not args.input.exists():
        msg = f"Doclet file not found: {args.input}"
        raise SystemExit(msg)

    config = load_config(args.config)
    _init_logging(config, verbose=args.verbose)

    try:
        doclets = load_doclets(args.input)
    except ValueError as e:
        raise SystemExit(str(e)) from e
    logger.info("Loaded %s doclets from %s", len(doclets), args.input)

    report = RelationReport()
    try:
        fixed = fix_relations(doclets, config, report)
    except RelationCycleError as e:
        raise SystemExit(str(e)) from e

    _write_doclets(fixed, args.output)

    if args.report:
        report.write(args.report)
        logger.info("Report written to %s", args.report)

    print(
        f"Wrote {len(fixed)} doclets ({report.total_added} added, "
        f"{report.total_ignored} ignored) into: {args.output}"
    )
    return 0


def _init_logging(config: dict[str, Any], *, verbose: bool) -> None:
    """Configure the root logger from config or the --verbose flag."""
    level = "DEBUG" if verbose else config.get("logging", {}).get("level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _write_doclets(doclets: list[dict[str, Any]], output: Path) -> None:
    """Write doclets as a JSON array."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(doclets, indent=2), encoding="utf-8")

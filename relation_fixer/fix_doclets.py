"""Fix inheritance relations in a JSDoc doclet dump.

Reads the JSON array produced by ``jsdoc -X``, adds nested relation arrays and
descendants, synthesizes inherited statics, events, mixed and implemented
members, and writes the resulting doclets back as JSON.
"""

import argparse
from pathlib import Path

from relation_fixer.run_fix import run_fix


def main() -> int:
    """Run the relation fixer."""
    ap = argparse.ArgumentParser(
        description="Add inherited, mixed and implemented members to JSDoc doclets.",
    )
    ap.add_argument(
        "input",
        type=Path,
        help="JSON (or YAML) file with the doclet array (jsdoc -X output)",
    )
    ap.add_argument(
        "output",
        type=Path,
        help="Where to write the fixed doclet array (JSON)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON summary of synthesized and ignored doclets",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    return run_fix(args)


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI command to generate breakpoint visibility stylesheets.

Loads a breakpoint configuration (JSON), then either prints individual media
query conditions (``--query``) or renders the full visibility toggle
stylesheet: device toggles, hidden-below / hidden-above breakpoint toggles and
print toggles.

Configuration problems that only degrade a single query (unknown breakpoint
names, descending widths) are logged as warnings; a table that does not start
at zero aborts with exit code 2.

Usage examples:
  python -m cli.generate_css
  python -m cli.generate_css --config my_breakpoints.json --prefix u- --output dist/visibility.css
  python -m cli.generate_css --query md --query sm:only --query 320px:down
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Tuple

from design import BreakpointConfigError, ConfigValidationError, DiagnosticLog, build_stylesheet, load_config


def _split_query(raw: str) -> Tuple[str, str | None]:
    value, sep, direction = raw.rpartition(":")
    if not sep:
        return raw, None
    return value, direction


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="generate-css", description="Generate breakpoint media query CSS")
    p.add_argument("--config", help="Path to breakpoint config JSON (default: bundled breakpoints.json)")
    p.add_argument("--prefix", help="Override identifier prefix for generated classes")
    p.add_argument("--output", help="Write stylesheet to this file instead of stdout")
    p.add_argument(
        "--query",
        action="append",
        default=[],
        metavar="VALUE[:DIRECTION]",
        help="Print the condition for a breakpoint or width (repeatable)",
    )
    p.add_argument("--strict", action="store_true", help="Exit with code 1 if any diagnostic was reported")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: List[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    diagnostics = DiagnosticLog()
    config_path = Path(args.config) if args.config else None
    if config_path is not None and not config_path.exists():
        ap.error(f"Config file not found: {config_path}")
    try:
        config = load_config(config_path, diagnostics)
    except (BreakpointConfigError, ConfigValidationError) as exc:
        ap.error(str(exc))
    if args.prefix is not None:
        config = config.with_prefix(args.prefix)

    if args.query:
        mq = config.media_query(diagnostics)
        for raw in args.query:
            value, direction = _split_query(raw)
            print(f"{raw}\t{mq.condition(value, direction)}")
    else:
        css, meta = build_stylesheet(config, diagnostics)
        if args.output:
            out_path = Path(args.output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(css, encoding="utf-8")
            print(f"Stylesheet written: {out_path} (toggles={meta.rules})")
        else:
            sys.stdout.write(css)

    if args.strict and len(diagnostics):
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

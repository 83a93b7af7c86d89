from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .api import run_scan
from .config import load_config
from .errors import ClientInitError, ConfigurationError
from .log import configure_logging, get_logger
from .reporting import render_yaml_report, save_yaml_report

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reliability-scanner",
        description="Run cluster reliability checks and report the results.",
    )
    parser.add_argument("--config", required=True, help="Path to the YAML check configuration.")
    parser.add_argument("--output", help="Write the YAML report here instead of stdout.")
    parser.add_argument("--timeout", type=float, default=None, help="Per-check deadline in seconds.")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log lines.")
    return parser


def run_scan_command(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level, json=args.log_json)
    logger = get_logger("reliability_scanner.cli")

    try:
        config = load_config(args.config)
        report = run_scan(config, timeout=args.timeout, logger=logger)
    except (ConfigurationError, ClientInitError) as exc:
        logger.error("scan aborted", error=str(exc))
        return EXIT_ERROR

    if args.output:
        target = save_yaml_report(report, args.output)
        logger.info("report written", path=str(target))
    else:
        sys.stdout.write(render_yaml_report(report))
    return EXIT_PASSED if report.ok else EXIT_FAILED


def main() -> None:
    raise SystemExit(run_scan_command())


if __name__ == "__main__":
    main()

"""
Command-line interface for procgroups.

Loads a rules document, scans running processes, prints the group each
matched process belongs to and reports expected processes that are not
running.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from ..classification import classify_processes, find_missing_processes
from ..config import get_config, get_config_info, set_config_path
from ..system import iter_process_attributes
from ..validation import ValidationError, handle_cli_error

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_MISSING_PROCESSES = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="procgroups",
        description="Group running processes by the naming rules of a rules document.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Rules document (.yaml, .yml or .toml) with a top-level 'process_names' list.",
    )
    parser.add_argument(
        "-p",
        "--pid",
        type=int,
        action="append",
        dest="pids",
        help="Only classify this PID. May be given more than once.",
    )
    parser.add_argument(
        "--show-unmatched",
        action="store_true",
        help="Also list processes that no rule matched.",
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Load and validate the rules document, then exit without scanning.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING).",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    """
    Main command-line entry point.

    Returns:
        EXIT_OK, or EXIT_MISSING_PROCESSES if a process expected by a
        ``report_missing`` rule is not running.

    Raises:
        SystemExit: With EXIT_CONFIG_ERROR if the rules document cannot be
            loaded.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if args.config:
        set_config_path(args.config)

    try:
        app_config = get_config()
    except (FileNotFoundError, ValidationError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=EXIT_CONFIG_ERROR,
            logger=logger,
        )

    if args.check_config:
        info = get_config_info()
        print(
            f"{info['config_path']}: {info['rules_count']} rules, "
            f"{info['missing_names_count']} expected process names",
            file=out,
        )
        return EXIT_OK

    processes = list(iter_process_attributes(args.pids))
    logger.info(f"Scanned {len(processes)} processes")

    groups = classify_processes(app_config.rule_set, processes)
    for group_name in sorted(groups):
        pids = groups[group_name]
        print(f"{group_name}\t{len(pids)}\t{','.join(str(p) for p in pids)}", file=out)

    if args.show_unmatched:
        matched_pids = {pid for pids in groups.values() for pid in pids}
        for attrs in processes:
            if attrs.pid not in matched_pids:
                print(f"unmatched:\t{attrs.pid}\t{attrs.name}", file=out)

    missing = find_missing_processes(app_config.missing_process_names, processes)
    for name in missing:
        print(f"missing:\t{name}", file=out)

    return EXIT_MISSING_PROCESSES if missing else EXIT_OK


def main() -> None:
    sys.exit(main_cli())


if __name__ == "__main__":
    main()

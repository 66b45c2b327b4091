"""
Console entry point.

Usage:
    python -m cli.main
    python -m cli.main --log-level DEBUG     # show every queue/process log line

The console owns a fresh in-memory JobScheduler for the lifetime of the
process. Nothing is saved on exit.
"""

import argparse
import logging
import sys

from config.settings import settings
from cli.console import Console
from scheduler.job_scheduler import JobScheduler


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive priority job scheduler")
    parser.add_argument(
        "--log-level", type=str, default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    args = parser.parse_args(argv)

    # Logs go to stderr so they don't interleave with the menu on stdout
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    Console(JobScheduler(), sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    main()

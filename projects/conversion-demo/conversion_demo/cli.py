#!/usr/bin/env python3

import argparse
import logging
import sys

from conversion_demo.runner import DemoRunner, wait_for_exit
from conversion_demo.settings import LOGGER_PREFIX
from numeric_core.conversion import OverflowMode


class DemoClient:
    """Command line entry of the demonstrator. Without arguments it runs every
    step with unchecked casts and waits for a line of input before exiting.
    """

    logger_prefix: str
    verbosity: int
    default_mode: OverflowMode
    pause: bool
    verify: bool

    argument_parser: argparse.ArgumentParser
    args: argparse.Namespace

    def __init__(self, logger_prefix: str = LOGGER_PREFIX):
        self.logger_prefix = logger_prefix
        self.verbosity = 0
        self.default_mode = OverflowMode.UNCHECKED
        self.pause = True
        self.verify = False

        self.argument_parser = self.generate_parser()
        self.args = argparse.Namespace()

    def set_logger_config(self):
        logger = logging.getLogger("demo")
        logger.propagate = False
        verbosity = min(max(0, self.verbosity), 2)
        logging_level = {0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}.get(
            verbosity, logging.ERROR
        )
        logger.setLevel(logging.DEBUG)

        # log records go to stderr, stdout only carries the demo output
        console_handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            f"[{self.logger_prefix} %(asctime)s ~ %(levelname)s]: %(message)s"
        )
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging_level)
        logger.handlers.clear()
        logger.addHandler(console_handler)

    def generate_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="conversion-demo",
            description="Integer widening, narrowing and overflow checking demonstration",
        )
        parser.add_argument("-v", "--verbosity", default=0, choices=[0, 1, 2], type=int)
        parser.add_argument(
            "--checked",
            action="store_true",
            help="check every plain cast for overflow (project-wide checking)",
        )
        parser.add_argument(
            "--no-pause",
            action="store_false",
            dest="pause",
            help="exit without waiting for input",
        )
        parser.add_argument(
            "--verify",
            action="store_true",
            help="cross-check every truncating conversion against numpy",
        )
        return parser

    def start(self, argv: list[str] | None = None) -> int:
        self.args = self.argument_parser.parse_args(argv)
        self.verbosity = self.args.verbosity
        self.default_mode = OverflowMode.CHECKED if self.args.checked else OverflowMode.UNCHECKED
        self.pause = self.args.pause
        self.verify = self.args.verify
        self.set_logger_config()
        return self.run()

    def run(self) -> int:
        runner = DemoRunner(self.default_mode, sys.stdout, verify=self.verify)
        runner.run()
        if self.pause:
            wait_for_exit(sys.stdin)
        return 0 if runner.is_verified else 1


def app():
    cli = DemoClient()
    sys.exit(cli.start())


if __name__ == "__main__":
    app()

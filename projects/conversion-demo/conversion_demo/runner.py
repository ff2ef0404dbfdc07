import logging
import sys
from typing import TextIO

from conversion_demo.kinds import NEXT_STATE, DemoState
from conversion_demo.steps import STEPS, StepReport
from numeric_core.conversion import OverflowMode
from numeric_core.oracle import NumpyOracle
from numeric_core.scope import OverflowContext

logger = logging.getLogger("demo")


class DemoRunner:
    """Runs the demonstration steps once, in order, from `WIDEN` to `EXIT`.

    `default_mode` is what a plain cast means for this run, the equivalent of
    building the original program with or without overflow checking.
    """

    default_mode: OverflowMode
    out: TextIO
    oracle: NumpyOracle | None

    state: DemoState
    reports: list[StepReport]
    mismatches: int

    def __init__(
        self,
        default_mode: OverflowMode = OverflowMode.UNCHECKED,
        out: TextIO | None = None,
        verify: bool = False,
    ):
        self.default_mode = default_mode
        self.out = out if out is not None else sys.stdout
        self.oracle = NumpyOracle() if verify else None

        self.state = DemoState.WIDEN
        self.reports = []
        self.mismatches = 0

    def step(self) -> StepReport:
        if self.state == DemoState.EXIT:
            raise RuntimeError("demo already finished")

        logger.info(f"running step '{self.state.value}'")
        report = STEPS[self.state](OverflowContext(self.default_mode))
        for line in report.lines:
            print(line, file=self.out)
        if self.oracle is not None:
            self.verify(report)

        self.reports.append(report)
        self.state = NEXT_STATE[self.state]
        return report

    def verify(self, report: StepReport):
        assert self.oracle, "no oracle"
        for source, target, observed in report.wrapped:
            if not self.oracle.verify(source, target, observed):
                self.mismatches += 1

    def run(self) -> list[StepReport]:
        logger.info(f"=== Start demo (default mode: {self.default_mode.value}) ===")
        while self.state != DemoState.EXIT:
            self.step()
        self.out.flush()
        logger.info("=== End demo ===")
        return self.reports

    @property
    def is_verified(self) -> bool:
        return self.mismatches == 0


def wait_for_exit(stdin: TextIO | None = None):
    """Hold the console open until a line (or EOF) arrives."""
    stdin = stdin if stdin is not None else sys.stdin
    logger.debug("waiting for input before exit")
    stdin.readline()

import logging
import time

from .models import Day
from .models import Puzzle
from .models import TestReport
from .utils import colored


log = logging.getLogger(__name__)

# (divisor, suffix) pairs, from largest unit to smallest, operating on nanoseconds
_UNITS = [
    (86_400_000_000_000, "d"),
    (3_600_000_000_000, "h"),
    (60_000_000_000, "m"),
    (1_000_000_000, "s"),
    (1_000_000, "ms"),
    (1_000, "us"),
    (1, "ns"),
]


def format_time(ns):
    """
    Render an elapsed time like "1m 2s 345ms", skipping any zero units. Colored:
    - green, if under a second
    - yellow, if under 15 seconds (every problem has a solution that completes in at
      most 15 seconds on ten-year-old hardware, see https://adventofcode.com/about)
    - red, if you're really slow
    """
    parts = []
    remaining = int(ns)
    for divisor, suffix in _UNITS:
        n, remaining = divmod(remaining, divisor)
        if n:
            parts.append(f"{n}{suffix}")
    txt = " ".join(parts) or "0ns"
    if ns < 1_000_000_000:
        color = "green"
    elif ns < 15_000_000_000:
        color = "yellow"
    else:
        color = "red"
    return colored(txt, color)


def print_report(day: Day, report: TestReport) -> None:
    print(f"Testing day {day.day} of AoC {day.year}")
    if report.inconclusive:
        print(colored(f"Part {report.part}: no examples", "magenta"))
        return
    for result in report:
        prefix = f"Part {report.part}, Example {result.index}: "
        if result.passed:
            print(prefix + colored("✔", "green") + f" {result.actual}")
        else:
            icon = colored("✖", "red")
            print(prefix + f"{icon} expected {result.expected!r}, got {result.actual!r}")


def run_timed(day: Day, puzzle: Puzzle):
    """Returns the answer and the solver's walltime in nanoseconds."""
    # fetching the input is not part of the timing
    data = day.input_data
    t0 = time.perf_counter_ns()
    answer = puzzle.solve(data)
    return answer, time.perf_counter_ns() - t0


def solve(day: Day, *puzzles: Puzzle, test=True, run=True) -> int:
    """
    Test each puzzle against its examples, then run it against the user's input, and
    render the results. Returns the number of failed examples. Errors in fetching the
    input, and errors raised by the solvers, are not handled here.
    """
    n_failed = 0
    for puzzle in puzzles:
        if test:
            report = day.test(puzzle)
            print_report(day, report)
            n_failed += len(report.failures)
        if run:
            answer, walltime = run_timed(day, puzzle)
            header = " ".join(
                [
                    "[" + colored("AoC", "yellow"),
                    f"{day.year},",
                    colored("day", "light_cyan"),
                    f"{day.day},",
                    colored("part", "light_cyan"),
                    f"{puzzle.part}]:",
                ]
            )
            print(header, colored(answer, "white"))
            print(colored("Finished in", "light_green"), format_time(walltime))
    if n_failed:
        log.warning("%d example%s failed", n_failed, "s"[: n_failed - 1])
    return n_failed

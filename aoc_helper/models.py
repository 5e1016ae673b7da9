from __future__ import annotations

import logging
import typing as t
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from pathlib import Path

from .cache import CacheKey
from .cache import InputCache
from .credentials import CredentialResolver
from .exceptions import CacheIOError


log = logging.getLogger(__name__)

T = t.TypeVar("T")


def _identity(data: str) -> t.Any:
    return data


@dataclass(frozen=True)
class Example:
    """Sample input from the puzzle description, and the answer it should produce."""

    input: str
    expected: str

    def __post_init__(self) -> None:
        # answers are compared as text, so allow e.g. Example("1\n2", 3)
        if not isinstance(self.expected, str):
            object.__setattr__(self, "expected", str(self.expected))


@dataclass(frozen=True)
class Puzzle(t.Generic[T]):
    """
    One part of a day's puzzle: the part number (1 or 2), the solver function, and
    any example inputs with their expected answers.

    The solver receives the puzzle input text, after passing it through ``transform``
    if one was given (see ``aoc_helper.transforms``). Whatever the solver returns is
    displayed with ``str``, and that string is the answer.

    Puzzles are immutable, so build them up by chaining::

        part_2 = Puzzle(2, solver).with_examples(("random\\nstuff\\nfoo", "1"))
    """

    part: int
    solver: t.Callable[[T], object]
    transform: t.Callable[[str], T] = field(default=_identity, repr=False)
    examples: tuple[Example, ...] = ()

    def with_examples(self, *examples: Example | tuple[str, object]) -> Puzzle[T]:
        """A copy of this puzzle, with the given (input, expected) pairs appended."""
        new = tuple(e if isinstance(e, Example) else Example(*e) for e in examples)
        return replace(self, examples=self.examples + new)

    def solve(self, data: str) -> str:
        return str(self.solver(self.transform(data)))


@dataclass(frozen=True)
class ExampleResult:
    index: int
    input: str
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.actual == self.expected


@dataclass(frozen=True)
class TestReport:
    """
    Outcome of running a puzzle's solver against each of its examples, in the order
    the examples were given. A report with no results is inconclusive: it says nothing
    about whether the solver is correct.
    """

    __test__ = False  # not a pytest test class

    part: int
    results: tuple[ExampleResult, ...] = ()

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> t.Iterator[ExampleResult]:
        return iter(self.results)

    def __getitem__(self, i: int) -> ExampleResult:
        return self.results[i]

    @property
    def inconclusive(self) -> bool:
        return not self.results

    @property
    def failures(self) -> list[ExampleResult]:
        return [r for r in self.results if not r.passed]

    @property
    def passed(self) -> bool:
        """All examples passed. False for an inconclusive (empty) report."""
        return bool(self.results) and not self.failures


class Day:
    """
    An Advent of Code day, e.g. ``Day(2015, 1)``. Tests a Puzzle against its examples,
    or runs it against the user's own input (fetched from adventofcode.com on first
    use, and cached afterwards).
    """

    def __init__(
        self,
        year: int,
        day: int,
        cache: InputCache | None = None,
        resolver: CredentialResolver | None = None,
        input_path: Path | str | None = None,
    ) -> None:
        self.year = year
        self.day = day
        if cache is not None and resolver is not None:
            raise ValueError("pass either cache or resolver, not both")
        if resolver is not None:
            cache = InputCache(resolver=resolver)
        self._cache = cache
        self.input_path = Path(input_path) if input_path is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.year}, {self.day})"

    @property
    def key(self) -> CacheKey:
        return CacheKey(year=self.year, day=self.day)

    @property
    def cache(self) -> InputCache:
        # created on demand, because testing against examples never needs it
        if self._cache is None:
            self._cache = InputCache()
        return self._cache

    def with_input(self, input_path: Path | str) -> Day:
        """A copy of this day which reads its input from a file of your choosing."""
        return Day(self.year, self.day, cache=self._cache, input_path=input_path)

    def with_session_id(self, session_id: str) -> Day:
        """A copy of this day which authenticates with the given session token."""
        resolver = CredentialResolver.from_environment(override=session_id)
        cache = InputCache(store=self.cache.store, resolver=resolver, http=self.cache.http)
        return Day(self.year, self.day, cache=cache, input_path=self.input_path)

    @property
    def input_data(self) -> str:
        """
        The user's puzzle input, from a custom input file if one was set, otherwise
        from the input cache. Trailing newlines are stripped.
        """
        if self.input_path is not None:
            try:
                data = self.input_path.read_text(encoding="utf-8")
            except OSError as err:
                raise CacheIOError(f"failed reading input {self.input_path}: {err}") from err
        else:
            data = self.cache.get(self.key).text
        return data.rstrip("\r\n")

    def test(self, puzzle: Puzzle) -> TestReport:
        """
        Run the puzzle's solver on each example input and compare what it displays with
        the expected answer. Mismatches are reported, not raised.
        """
        results = []
        for i, example in enumerate(puzzle.examples, start=1):
            actual = puzzle.solve(example.input)
            result = ExampleResult(index=i, input=example.input, expected=example.expected, actual=actual)
            log.debug("%r part %d example %d: %s", self, puzzle.part, i, "pass" if result.passed else "fail")
            results.append(result)
        return TestReport(part=puzzle.part, results=tuple(results))

    def run(self, puzzle: Puzzle) -> str:
        """Run the puzzle's solver on the user's input and return the displayed answer."""
        data = self.input_data
        log.info("running %r part %d", self, puzzle.part)
        return puzzle.solve(data)

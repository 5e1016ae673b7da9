"""
Parsers which turn raw puzzle input text into something more convenient for a solver.
Any of these can be given as the ``transform`` of a Puzzle: each one accepts the input
text as its single positional argument and returns the parsed data.
"""

__all__ = ["blocks", "grid", "ints", "lines", "numbers"]

import re

_int_pattern = re.compile(r"-?\d+")


def lines(data):
    return data.splitlines()


def blocks(data):
    # groups of lines separated by one or more blank lines
    return [b for b in re.split(r"\n\s*\n", data.strip("\n")) if b]


def grid(data):
    return [list(line) for line in data.splitlines()]


def ints(data):
    return [int(n) for n in _int_pattern.findall(data)]


def numbers(data):
    result = []
    for line in data.splitlines():
        found = ints(line)
        if found:
            result.append(found)
    if all(len(n) == 1 for n in result):
        # one number per line: flatten
        result = [n for [n] in result]
    if len(result) == 1:
        # only one line: un-nest
        [result] = result
    return result

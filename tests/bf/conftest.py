"""
Test fixtures and helpers for the Brainfuck parser tests.

- parse_and_assert: parse source and compare the resulting Program
- parse_and_catch: parse source and expect a specific ParseError
- nested_loops: build source with a given number of nested empty loops
"""

import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, Type

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from bfparse.parser import parse, ParseError, Program, Instruction


HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++."
    "------.--------.>>+.>++."
)

ROT13 = (
    "-,+[-[>>++++[>++++++++<-]<+<-[>+>+>-[>>>]<[[>+<-]>>+>]<<<<<-]]>>>[-]+>--[-[<->+++[-]]]"
    "<[++++++++++++<[>-[>+>>]>[+[<+>-]>+>>]<<<<<-]>>[<+>-]>[-[-<<[-]>>]<<[<<->>-]>>]<<[<<+>>-]]"
    "<[-]<.[-]<-,+]"
)


def parse_and_assert(source: str, expected: Sequence[Instruction]):
    """
    Parse source and assert the whole input was consumed into `expected`.
    """
    remaining, program = parse(source)
    if remaining != "":
        raise AssertionError(f"ParseAndAssert failed. Unconsumed input: {remaining!r}")
    if program != Program(expected):
        raise AssertionError(
            f"ParseAndAssert failed. Expected: {list(expected)}. Actual: {list(program)}. "
            f"Source was: {source!r}"
        )
    return program


def parse_and_catch(
    source: str,
    exception_type: Type[ParseError],
    predicate: Optional[Callable[[ParseError], bool]] = None,
) -> ParseError:
    """
    Parse source and expect it to raise `exception_type`.
    """
    with pytest.raises(exception_type) as excinfo:
        parse(source)
    if predicate is not None and not predicate(excinfo.value):
        raise AssertionError(
            f"ParseAndCatch failed. Predicate rejected {excinfo.value!s}. "
            f"Source was: {source!r}"
        )
    return excinfo.value


def nested_loops(depth: int) -> str:
    """Source for `depth` empty loops nested inside each other."""
    return "[" * depth + "]" * depth

"""
Brainfuck Parser - Builds Abstract Syntax Tree from source text.

Recursive descent over single characters: a sequence is parsed until no
further instruction is recognised, and a loop is a sequence between '['
and ']'.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Type

from .ast_nodes import (
    SYMBOLS, LOOP_OPEN, LOOP_CLOSE, Instruction, Loop, Program,
)
from .errors import ParseError, UnterminatedLoopError, TrailingInputError


@dataclass(frozen=True)
class Mark:
    """A saved cursor position."""
    pos: int
    line: int
    column: int


class Parser:
    """Parses Brainfuck source into an Abstract Syntax Tree."""

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1

    @property
    def remaining(self) -> str:
        """Input not yet consumed."""
        return self.source[self.pos:]

    def mark(self) -> Mark:
        return Mark(self.pos, self.line, self.column)

    def error(self, error_class: Type[ParseError], message: str, at: Optional[Mark] = None):
        """Raise a parse error located at `at` (default: the cursor)."""
        at = at or self.mark()
        raise error_class(message, self.filename, at.line, at.column, at.pos, self.remaining)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character at current position + offset."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        ch = self.source[self.pos]
        self.pos += 1

        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return ch

    def describe_current(self) -> str:
        ch = self.peek()
        return "end of input" if ch is None else repr(ch)

    def parse(self) -> Program:
        """Parse the entire program. All input must be consumed."""
        instructions = self.parse_sequence()

        if self.peek() == LOOP_CLOSE:
            self.error(TrailingInputError, "Unmatched ']' with no open loop")
        elif self.peek() is not None:
            self.error(TrailingInputError, f"Unexpected character {self.describe_current()}")

        return Program(instructions)

    def parse_leaf(self) -> Optional[Instruction]:
        """Parse one of the six single-character instructions, or return None."""
        node_type = SYMBOLS.get(self.peek())
        if node_type is None:
            return None
        line, column = self.line, self.column
        self.advance()
        return Instruction(node_type, line, column)

    def parse_loop(self) -> Optional[Loop]:
        """Parse a loop, i.e. `[ ]`, or return None if no '[' is here."""
        opened = self.open_loop()
        if opened is None:
            return None
        return self.close_loop(opened, self.parse_sequence())

    def parse_instruction(self) -> Optional[Instruction]:
        """Parse a basic instruction or loop, or return None without consuming."""
        node = self.parse_leaf()
        if node is not None:
            return node
        return self.parse_loop()

    def parse_sequence(self) -> List[Instruction]:
        """
        Parse instructions until none is recognised at the cursor.

        Never fails on its own: the sequence simply ends at end of input,
        at a ']' owned by an enclosing loop, or at any other character.
        This is parse_instruction applied repeatedly, unrolled: it uses the
        same parse_leaf, open_loop and close_loop steps as parse_instruction
        and parse_loop, but the sequences enclosing open loops wait on an
        explicit stack so nesting depth does not touch the interpreter's
        recursion limit.
        """
        instructions: List[Instruction] = []
        open_loops: List[Tuple[Mark, List[Instruction]]] = []

        while True:
            node = self.parse_leaf()
            if node is not None:
                instructions.append(node)
                continue

            opened = self.open_loop()
            if opened is not None:
                open_loops.append((opened, instructions))
                instructions = []
                continue

            if not open_loops:
                return instructions

            opened, enclosing = open_loops.pop()
            enclosing.append(self.close_loop(opened, instructions))
            instructions = enclosing

    def open_loop(self) -> Optional[Mark]:
        """Consume a '[' and return its position, or return None if absent."""
        if self.peek() != LOOP_OPEN:
            return None
        opened = self.mark()
        self.advance()
        return opened

    def close_loop(self, opened: Mark, body: List[Instruction]) -> Loop:
        """Consume the ']' closing the loop opened at `opened` and build it."""
        if self.peek() != LOOP_CLOSE:
            self.error(
                UnterminatedLoopError,
                f"Expected ']' to close loop opened at {opened.line}:{opened.column}, "
                f"got {self.describe_current()}",
                at=opened,
            )
        self.advance()
        return Loop(body, opened.line, opened.column)


def parse(source: str, filename: str = "<input>") -> Tuple[str, Program]:
    """
    Parse entire Brainfuck source.

    Returns the unconsumed input (always empty on success) and the Program.
    Raises UnterminatedLoopError or TrailingInputError on malformed input.
    """
    parser = Parser(source, filename)
    program = parser.parse()
    return parser.remaining, program

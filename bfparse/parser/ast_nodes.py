"""
Abstract Syntax Tree node definitions for Brainfuck.

Each node represents one instruction. Six of them are leaves; a Loop owns
the instructions between its brackets.
"""

from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Dict, Iterable, Iterator, List, Tuple
from enum import Enum, auto


class NodeType(Enum):
    """AST node types."""
    RIGHT_SHIFT = auto()   # >
    LEFT_SHIFT = auto()    # <
    INCREMENT = auto()     # +
    DECREMENT = auto()     # -
    OUTPUT = auto()        # .
    INPUT = auto()         # ,
    LOOP = auto()          # [ ... ]


SYMBOLS: Dict[str, NodeType] = {
    '>': NodeType.RIGHT_SHIFT,
    '<': NodeType.LEFT_SHIFT,
    '+': NodeType.INCREMENT,
    '-': NodeType.DECREMENT,
    '.': NodeType.OUTPUT,
    ',': NodeType.INPUT,
}

LOOP_OPEN = '['
LOOP_CLOSE = ']'

# Reverse of SYMBOLS, used when rendering source
_SYMBOL_FOR = {node_type: symbol for symbol, node_type in SYMBOLS.items()}

_DISPLAY_NAMES = {
    NodeType.RIGHT_SHIFT: "RightShift",
    NodeType.LEFT_SHIFT: "LeftShift",
    NodeType.INCREMENT: "Increment",
    NodeType.DECREMENT: "Decrement",
    NodeType.OUTPUT: "Output",
    NodeType.INPUT: "Input",
    NodeType.LOOP: "Loop",
}


@dataclass(frozen=True)
class Instruction:
    """A single instruction. Positions are informational and never compared."""
    node_type: NodeType
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.node_type is NodeType.LOOP and type(self) is Instruction:
            raise ValueError("Loop instructions must be built with Loop(body)")

    @property
    def name(self) -> str:
        return _DISPLAY_NAMES[self.node_type]

    def __repr__(self):
        return self.name


@dataclass(frozen=True, eq=False)
class Loop(Instruction):
    """Loop node: [ body ]

    Equality and hashing walk the body iteratively, so deeply nested loops
    compare without hitting the recursion limit.
    """
    body: Tuple[Instruction, ...] = ()

    def __init__(self, body: Iterable[Instruction] = (), line: int = 0, column: int = 0):
        super().__init__(NodeType.LOOP, line, column)
        object.__setattr__(self, 'body', tuple(body))

    def __eq__(self, other):
        if not isinstance(other, Loop):
            return NotImplemented
        return _same_shape((self,), (other,))

    def __hash__(self):
        return hash(tuple(_shape((self,))))

    def __repr__(self):
        return f"Loop({len(self.body)} instrs)"


# Leaf values for building trees by hand
RIGHT_SHIFT = Instruction(NodeType.RIGHT_SHIFT)
LEFT_SHIFT = Instruction(NodeType.LEFT_SHIFT)
INCREMENT = Instruction(NodeType.INCREMENT)
DECREMENT = Instruction(NodeType.DECREMENT)
OUTPUT = Instruction(NodeType.OUTPUT)
INPUT = Instruction(NodeType.INPUT)


@dataclass(frozen=True, eq=False)
class Program:
    """Top-level program node: the ordered instructions of one source unit."""
    instructions: Tuple[Instruction, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'instructions', tuple(self.instructions))

    def __len__(self):
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented
        return _same_shape(self.instructions, other.instructions)

    def __hash__(self):
        return hash(tuple(_shape(self.instructions)))

    def __repr__(self):
        return f"Program({len(self.instructions)} instrs)"


def walk(nodes: Iterable[Instruction]) -> Iterator[Tuple[int, Instruction]]:
    """
    Yield (depth, instruction) for every node in pre-order.

    Top-level nodes have depth 0, the body of a top-level loop depth 1, and
    so on. Uses an explicit stack so deeply nested loops are safe to visit.
    """
    stack: List[Tuple[int, Iterator[Instruction]]] = [(0, iter(nodes))]
    while stack:
        depth, children = stack[-1]
        node = next(children, None)
        if node is None:
            stack.pop()
            continue
        yield depth, node
        if isinstance(node, Loop) and node.body:
            stack.append((depth + 1, iter(node.body)))


def count_instructions(program: Program) -> int:
    """Count every node in the program, loops included."""
    return sum(1 for _ in walk(program))


def max_depth(program: Program) -> int:
    """Deepest loop nesting in the program (0 when there are no loops)."""
    deepest = 0
    for depth, node in walk(program):
        if isinstance(node, Loop):
            deepest = max(deepest, depth + 1)
    return deepest


def dump(program: Program, indent: str = "  ") -> str:
    """Render the program as an indented tree, one node per line."""
    lines = []
    for depth, node in walk(program):
        if isinstance(node, Loop):
            text = f"Loop ({len(node.body)} instrs)"
        else:
            text = node.name
        if node.line:
            text += f"  @{node.line}:{node.column}"
        lines.append(indent * depth + text)
    return "\n".join(lines)


def to_source(program: Program) -> str:
    """Render the program back to canonical Brainfuck source."""
    parts = []
    # Each entry is the iterator of a sequence still being emitted
    stack: List[Iterator[Instruction]] = [iter(program)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            if stack:
                parts.append(LOOP_CLOSE)
            continue
        if isinstance(node, Loop):
            parts.append(LOOP_OPEN)
            stack.append(iter(node.body))
        else:
            parts.append(_SYMBOL_FOR[node.node_type])
    return "".join(parts)


def _shape(nodes: Iterable[Instruction]) -> Iterator[Tuple[int, NodeType]]:
    """(depth, node_type) pairs in pre-order; together they determine the tree."""
    for depth, node in walk(nodes):
        yield depth, node.node_type


def _same_shape(first: Iterable[Instruction], second: Iterable[Instruction]) -> bool:
    return all(a == b for a, b in zip_longest(_shape(first), _shape(second)))

"""Brainfuck Parser - Builds Abstract Syntax Tree from source text."""

from .parser import Parser, parse
from .errors import ParseError, UnterminatedLoopError, TrailingInputError
from .ast_nodes import *

__all__ = [
    'Parser', 'parse',
    'ParseError', 'UnterminatedLoopError', 'TrailingInputError',
    'NodeType', 'Instruction', 'Loop', 'Program',
]

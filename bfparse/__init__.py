"""
Brainfuck parser (bfparse) - Parses Brainfuck source into an instruction tree.

This package provides the parser, the AST it produces, and a small command
line front end that prints the tree.
"""

__version__ = "0.1.0"
__author__ = "bfparse Project"

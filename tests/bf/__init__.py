"""
Tests for the Brainfuck parser.

These tests verify that bfparse correctly handles:
- Leaf instructions and their source positions
- Loops, including empty and deeply nested ones
- Unterminated loops and trailing input
- The command-line front end
"""

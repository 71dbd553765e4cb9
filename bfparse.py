#!/usr/bin/env python3
"""
Brainfuck parser entry point.

Usage: python bfparse.py [input.bf] [-e SOURCE] [-f tree|repr|source] [--verbose]
"""

from bfparse.driver import main

if __name__ == '__main__':
    main()

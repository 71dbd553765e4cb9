"""
Brainfuck parser front end.

Reads source, runs the parser and reports the resulting tree.
"""

import sys
from typing import Optional

from .parser import Parser
from .parser.ast_nodes import Program, count_instructions, max_depth, dump, to_source, walk, Loop

DEMO_SOURCE = "+>>+[->+<]-"

FORMATS = ('tree', 'repr', 'source')


class ParseDriver:
    """Runs the parser over strings and files."""

    def __init__(self, verbose: bool = False, keep_newline: bool = False):
        self.verbose = verbose
        self.keep_newline = keep_newline  # Parse a file's final newline instead of stripping it

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[bfparse] {message}", file=sys.stderr)

    def parse_string(self, source: str, filename: str = "<input>") -> Program:
        """
        Parse Brainfuck source text.

        Raises:
            UnterminatedLoopError, TrailingInputError: on malformed input
        """
        self.log(f"Parsing {filename} ({len(source)} chars)...")
        program = Parser(source, filename).parse()

        loops = sum(1 for _, node in walk(program) if isinstance(node, Loop))
        self.log(f"  {len(program)} top-level instructions")
        self.log(f"  {count_instructions(program)} instructions in total")
        self.log(f"  {loops} loops, max nesting depth {max_depth(program)}")
        return program

    def parse_file(self, input_path: str) -> Program:
        """Read and parse a source file (UTF-8)."""
        self.log(f"Reading {input_path}...")
        with open(input_path, 'r', encoding='utf-8') as f:
            source = f.read()

        if not self.keep_newline:
            if source.endswith('\r\n'):
                source = source[:-2]
            elif source.endswith('\n'):
                source = source[:-1]

        return self.parse_string(source, str(input_path))

    def run(self, input_path: Optional[str] = None, source: Optional[str] = None,
            output_format: str = 'tree') -> bool:
        """
        Parse a file or a string and print the tree to stdout.

        Returns:
            True if parsing succeeded, False otherwise
        """
        try:
            if input_path is not None:
                program = self.parse_file(input_path)
            else:
                program = self.parse_string(DEMO_SOURCE if source is None else source)
        except OSError as e:
            print(f"Error: Cannot read {input_path}: {e.strerror or e}", file=sys.stderr)
            return False
        except UnicodeDecodeError as e:
            print(f"Error: Cannot read {input_path}: not valid UTF-8 ({e.reason} at byte {e.start})",
                  file=sys.stderr)
            return False
        except SyntaxError as e:
            print(f"Syntax error: {e}", file=sys.stderr)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False

        print(format_program(program, output_format))
        return True


def format_program(program: Program, output_format: str = 'tree') -> str:
    """Render a program in one of FORMATS."""
    if output_format == 'tree':
        return dump(program)
    if output_format == 'repr':
        return repr(list(program))
    if output_format == 'source':
        return to_source(program)
    raise ValueError(f"Unknown output format: {output_format}")


def main(argv=None):
    """Command-line interface for the parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description='bfparse - Parse Brainfuck source and print its syntax tree'
    )
    parser.add_argument('input', nargs='?',
                       help='Input Brainfuck source file')
    parser.add_argument('-e', '--eval', dest='source', metavar='SOURCE',
                       help=f'Parse SOURCE instead of a file (default: {DEMO_SOURCE!r})')
    parser.add_argument('-f', '--format', default='tree', choices=FORMATS,
                       help='Output format (default: tree)')
    parser.add_argument('--keep-newline', action='store_true',
                       help="Do not strip the file's trailing newline before parsing")
    parser.add_argument('--verbose', action='store_true',
                       help='Verbose output')

    args = parser.parse_args(argv)

    if args.input and args.source is not None:
        parser.error('give either an input file or --eval, not both')

    driver = ParseDriver(verbose=args.verbose, keep_newline=args.keep_newline)
    success = driver.run(args.input, args.source, args.format)

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()

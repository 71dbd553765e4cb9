"""Parse errors raised by the Brainfuck parser."""


class ParseError(SyntaxError):
    """
    Base class for parse failures.

    Carries the location the failure is reported at and the input that was
    left unconsumed. The message is prefixed with "file:line:column" so it
    reads like any other toolchain diagnostic.
    """

    def __init__(self, message: str, source_name: str = "<input>", line: int = 0,
                 column: int = 0, position: int = 0, remaining: str = ""):
        self.message = message
        self.source_name = source_name
        self.line = line
        self.column = column
        self.position = position
        self.remaining = remaining
        super().__init__(f"{source_name}:{line}:{column}: {message}")


class UnterminatedLoopError(ParseError):
    """A '[' was consumed but no matching ']' followed its body."""


class TrailingInputError(ParseError):
    """The top-level sequence ended before the end of the input."""

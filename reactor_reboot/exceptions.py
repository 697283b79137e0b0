"""Exception hierarchy shared by the cuboid algebra, the reactor and the parser."""

# ERROR MESSAGES
INVALID_RANGE_ERROR_MSG = "Invalid {axis} range {lo}..{hi}: minimum must not exceed maximum"
NON_INTEGER_BOUND_ERROR_MSG = "Invalid {axis} bound {value!r}: cuboid bounds must be integers"
PARSE_ERROR_MSG = "Line {line_no}: cannot parse instruction {line!r}"


class ReactorError(Exception):
    """Base exception for reactor reboot operations."""
    pass

class InvalidRangeError(ReactorError, ValueError):
    """Raised when a cuboid is built from an inverted axis range."""
    pass

class ParseError(ReactorError, ValueError):
    """Raised when an instruction line cannot be parsed."""

    def __init__(self, line: str, line_no: int | None = None):
        self.line = line
        self.line_no = line_no
        super().__init__(PARSE_ERROR_MSG.format(line_no=line_no if line_no is not None else "?", line=line))

class ValidationError(ReactorError):
    """Raised when parameter validation fails."""
    pass



class SlangError(Exception):
    """ Base class for all slang errors"""
    pass

class SlangUndefinedSymbol(SlangError):
    """ Raised when a symbol is looked up or mutated before it is defined"""
    pass

class SlangRedefinitionError(SlangError):
    """ Raised when a symbol is defined twice in the same frame"""

class SlangTypeError(SlangError):
    """ Raised when an operand lacks the capability or shape an operation requires"""

class SlangArityError(SlangError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SlangNotApplicable(SlangError):
    """ Raised when a value that is not a procedure is applied"""

class SlangBoundsError(SlangError):
    """ Raised when a sequence index is out of range"""

class SlangFormError(SlangError):
    """ Raised when a special form does not match its grammar"""

class SlangSyntaxError(SlangError):
    """ Raised by the reader on malformed source text"""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column

class SlangZeroDivisionError(SlangError):
    """ Raised when the modulo operator is given a zero divisor"""

class SlangRecursionError(SlangError):
    """ Raised when non-tail nesting exhausts the host stack"""

class SlangBudgetExceeded(SlangError):
    """ Raised when an evaluation runs past its configured step budget"""

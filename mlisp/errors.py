
class MlispError(Exception):
    """ Base class for all mlisp errors"""
    pass


class LexError(MlispError):
    """ Raised when the source text cannot be split into tokens"""

    def __init__(self, char: str, offset: int):
        super().__init__(f"Unexpected character {char!r} at offset {offset}")
        self.char = char
        self.offset = offset


class ParseError(MlispError):
    """ Raised when a token sequence is not a well formed expression"""


class BadParse(ParseError):
    """ Raised for an unclosed delimiter, a stray closing paren or nesting too deep to parse"""


class ParseEOF(ParseError):
    """ Raised when an expression is expected but no tokens remain"""

    def __init__(self):
        super().__init__("EOF")


class EvalError(MlispError):
    """ Raised when evaluation of an expression fails"""


class ArityError(EvalError):
    """ Raised when a form or function gets the wrong number of arguments"""


class TypeMismatchError(EvalError):
    """ Raised when an argument has the wrong shape, e.g. a symbol where a number is needed"""


class UnitValueError(EvalError):
    """ Raised when Unit is used where a value is required"""


class ScopeError(EvalError):
    """ Raised when the environment has no frame to operate on"""

class MlspError(Exception):
    """ Base class for all mlsp errors"""
    pass

class MlspSyntaxError(MlspError):
    """ Raised when source text cannot be turned into a tree"""

class MlspLexError(MlspSyntaxError):
    """ Raised when no token rule matches the remaining input"""

    def __init__(self, message: str, line: int, pos: int):
        super().__init__(f"{message} at line {line} position {pos}")
        self.line = line
        self.pos = pos

class MlspParseError(MlspSyntaxError):
    """ Raised on unbalanced parentheses"""

class MlspStructureError(MlspError):
    """ Raised when a tree node has a shape the evaluator cannot reduce"""

class MlspArityError(MlspError):
    """ Raised when a form is missing operands"""

class MlspTypeError(MlspError):
    """ Raised when an operator is applied to operands of the wrong type"""

class MlspOverflowError(MlspTypeError):
    """ Raised when an arithmetic result leaves the 32-bit integer range"""

class MlspInvalidSymbol(MlspError):
    """ Raised when a Symbol is required but something else was given"""

class MlspUnboundSymbol(MlspError):
    """ Raised when a symbol in call position is neither a form nor bound"""

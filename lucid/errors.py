from lucid.types import ErrorVal

# Error kinds carried in ErrorVal.name
UNDEFINED_VARIABLE = 'UndefinedVariable'
UNDEFINED_FUNCTION = 'UndefinedFunction'
UNKNOWN_OPERATOR = 'UnknownOperator'
NOT_IMPLEMENTED = 'NotImplemented'
MALFORMED_INPUT = 'MalformedInput'
DIVISION_BY_ZERO = 'DivisionByZero'
TYPE_MISMATCH = 'TypeMismatch'


class LucidError(Exception):
    """Exception type used to propagate Lucid errors."""
    def __init__(self, err: ErrorVal):
        super().__init__(f"{err.name}: {err.message}")
        self.err = err

    @property
    def name(self) -> str:
        return self.err.name

    @property
    def message(self) -> str:
        return self.err.message

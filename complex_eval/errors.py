class ComplexEvalError(Exception):
    """Base class of every error raised by complex_eval."""


class MissingInputError(ComplexEvalError, FileNotFoundError):
    def __init__(self, file_path, kind='input'):
        self.file_path = file_path
        self.kind = kind
        super().__init__(f'{kind} file not found or not readable: {file_path}')


class MalformedLineError(ComplexEvalError, ValueError):
    def __init__(self, file_path, line_number, line, reason):
        self.file_path = file_path
        self.line_number = line_number
        self.line = line
        super().__init__(f'{file_path}:{line_number}: {reason}: {line!r}')


class DegenerateInputError(ComplexEvalError, ZeroDivisionError):
    """A metric denominator is zero, e.g. no predicted or no reference complex."""


class InvalidOptionError(ComplexEvalError, ValueError):
    pass

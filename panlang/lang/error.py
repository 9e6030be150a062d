"""Error handling for the PanLang language. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a PanLang error/warning. msg is a format
    string whose fields are filled with exprs (bolded). line and col locate the error in the registered source, and
    start/end select the part of the offending expr to highlight.
    """
    label = "error"

    def __init__(self, msg, exprs=None, line=None, col=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.line = line
        self.col = col
        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    @property
    def located(self):
        """Whether or not this error points at a position in the source."""
        return self.line is not None and self.col is not None


class LexWarning(GenericException):
    """Unrecognized character. Reported through ErrorHandler.warn and never raised."""
    label = "warning"


class PanSyntaxError(GenericException):
    """Token stream does not match the grammar at the current position."""
    label = "syntax error"


class PanNameError(GenericException):
    """Variable read before it was assigned."""
    label = "name error"


class PanTypeError(GenericException):
    """String value used in a numeric context."""
    label = "type error"


class PanArithmeticError(GenericException):
    """Division by zero."""
    label = "arithmetic error"


class ResourceError(GenericException):
    """Source file could not be found, opened, or read."""
    label = "resource error"


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom PanLang errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream  # defaults to sys.stderr at print time
        self.traceback = {}

    def register_file(self, path, source=None):
        """Registers path (and the source running under it) in traceback. Should be called prior to Session add."""
        self.traceback[path] = source

    def remove_file(self, path):
        """Removes path from traceback. Should be called after a successful Session run."""
        self.traceback.pop(path, None)

    def _print(self, msg):
        print(msg, file=self.stream if self.stream is not None else sys.stderr)

    def _location(self, error):
        """Returns (path, offending source line) for error, using the most recently registered file."""
        if not self.traceback:
            return None, None

        path, source = next(reversed(self.traceback.items()))
        if source is None or not error.located:
            return path, None

        lines = source.split("\n")
        if 0 < error.line <= len(lines):
            return path, lines[error.line - 1]
        return path, None

    @staticmethod
    def diagnose(error, line, warning=False):
        """Returns line with the offending part of error.expr highlighted and underlined."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR
        col = error.col - 1 + error.start

        diagnosis = "  " + line[:col]

        end = max(error.end - error.start, 1)
        diagnosis += colored(line[col:col + end], color, attrs=["bold"])
        diagnosis += line[col + end:] + "\n"

        diagnosis += "  " + "".join(char if char == "\t" else " " for char in line[:col])
        diagnosis += colored("^" + "~" * (end - 1), color, attrs=["bold"])

        return diagnosis

    def _header(self, error, path):
        header = ""
        if path is not None:
            header += f"{path}:"
        if error.located:
            header += f"{error.line}:{error.col}:"
        return colored(header + " ", attrs=["bold"]) if header else ""

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args. Never interrupts the run."""
        error = LexWarning(*args, **kwargs)
        path, line = self._location(error)

        warn_msg = self._header(error, path)
        warn_msg += colored(f"{error.label}: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        self._print(warn_msg)

        if line is not None and error.expr and error.diagnosis:
            self._print(ErrorHandler.diagnose(error, line, warning=True))

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException. Exits if self.fatal."""
        path, line = self._location(error)

        error_msg = self._header(error, path)
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(f"{error.label}: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        self._print(error_msg)

        if not error.internal and line is not None and error.expr and error.diagnosis:
            self._print(ErrorHandler.diagnose(error, line))

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("expression nesting too deep, maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit

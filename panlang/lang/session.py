"""Session control for the PanLang language. Feeds source through lexing, parsing and evaluation, either in
command-line mode (one line at a time) or file interpretation mode.
"""

import os

from panlang.lang.error import ResourceError
from panlang.runtime.builtins import ConsoleRuntime
from panlang.runtime.environment import Environment
from panlang.runtime.evaluator import Evaluator
from panlang.syntax.parser import Parser


class Session:
    """Governs a PanLang session, owning its Environment. Sessions are independent of each other."""
    SH_FILE = "<in>"     # command-line interpreter filename
    EXTENSION = ".pan"   # required extension for source files

    def __init__(self, error_handler, path, cmd_line, persist=None, runtime=None, backend=None):
        """persist decides whether bindings survive from one command-line input to the next. It defaults to False in
        command-line mode and is always True for files, which run in a single Environment.
        """
        self.error_handler = error_handler
        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.persist = (not cmd_line) if persist is None else persist

        self.environment = Environment()
        self.evaluator = Evaluator(runtime if runtime is not None else ConsoleRuntime())
        self.backend = backend

        self.source = ""
        self.program = []  # parsed statements waiting to run

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            self.source = Session.read(path)
        elif not cmd_line:
            raise ResourceError("'{}' is a reserved filename", Session.SH_FILE)

    @staticmethod
    def read(path):
        """Returns the contents of path, which must be a readable file with the PanLang extension."""
        if not path.endswith(Session.EXTENSION) or len(path) <= len(Session.EXTENSION):
            raise ResourceError("'{}' is not a PanLang file, expected a " + Session.EXTENSION + " extension", path)
        if not os.path.isfile(path):
            raise ResourceError("'{}' does not exist", path)

        try:
            with open(path, "r", encoding="utf-8") as file:
                return file.read()
        except (OSError, UnicodeDecodeError):
            raise ResourceError("'{}' could not be read", path)

    def add(self, source=None):
        """Parses source (the session's file contents if None) and queues its statements. Nothing runs until run is
        called. A syntax error leaves the queue untouched.
        """
        if source is None:
            source = self.source

        self.error_handler.register_file(self.path, source)  # in case error is raised
        self.program += Parser.from_source(source, self.error_handler).parse_program()

    def run(self):
        """Runs this session's queued statements in order. Will raise any errors that are encountered."""
        if self.cmd_line and not self.persist:
            self.environment.reset()

        try:
            self.evaluator.run(self.program, self.environment)
        finally:
            if self.cmd_line:
                self.program = []

        self.error_handler.remove_file(self.path)  # error was not raised

    def compile(self):
        """Hands the queued program to this session's backend. Returns whether code generation succeeded, or None if
        the session has no backend.
        """
        if self.backend is None:
            return None
        return self.backend.generate_code(self.program)

    def display(self):
        """Returns the queued program's syntax trees, one per statement."""
        return "\n".join(statement.display() for statement in self.program)

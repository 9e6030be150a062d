"""Code generation backends. The interpreter never needs one; Session.compile hands a parsed program to whichever
backend the session was given and reports the result.
"""

import sys
from abc import abstractmethod, ABC


class Backend(ABC):

    @abstractmethod
    def generate_code(self, program):
        """Attempts to lower program (a list of top-level statements) to an executable form. Returns success."""


class NullBackend(Backend):
    """Accepts every program and produces nothing."""

    def generate_code(self, program):
        return True


class MockBackend(Backend):
    """Stand-in for a native backend: announces what it would do without generating anything."""
    NAME = "LLVM Backend"

    def __init__(self, stream=None):
        self.stream = stream

    def _announce(self, msg):
        print(f"{MockBackend.NAME}: {msg}", file=self.stream if self.stream is not None else sys.stdout)

    def generate_code(self, program):
        self._announce("Initializing code generation (mock).")
        if program is None:
            self._announce("No program to lower.")
            return False

        self._announce(f"Processing {len(program)} statement(s) (mock)...")
        self._announce("IR generation complete (mock).")
        return True

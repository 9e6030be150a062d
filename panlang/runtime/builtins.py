"""Primitive runtime operations the evaluator delegates output and integer addition to."""

import operator
import sys
from abc import abstractmethod, ABC


class Runtime(ABC):
    """Host-provided primitives. Each print call produces exactly one line."""

    @abstractmethod
    def print_string(self, text):
        ...

    @abstractmethod
    def print_integer(self, number):
        ...

    @abstractmethod
    def print_double(self, number):
        ...

    @abstractmethod
    def add_integer(self, a, b):
        ...


class ConsoleRuntime(Runtime):
    """Writes to stream, or to whatever sys.stdout is at call time if stream is None."""

    def __init__(self, stream=None):
        self.stream = stream

    def _write(self, line):
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def print_string(self, text):
        if text is not None:
            self._write(text)

    def print_integer(self, number):
        self._write(f"{number:d}")

    def print_double(self, number):
        self._write(f"{number:f}")

    def add_integer(self, a, b):
        return operator.add(a, b)

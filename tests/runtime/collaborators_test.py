import io
import unittest

from panlang.runtime.backend import Backend, MockBackend, NullBackend
from panlang.runtime.builtins import ConsoleRuntime, Runtime
from panlang.syntax.parser import parse


class ConsoleRuntimeTestCase(unittest.TestCase):

    def test_prints(self):
        out = io.StringIO()
        runtime = ConsoleRuntime(out)

        runtime.print_string("hello")
        runtime.print_string(None)
        runtime.print_integer(-12)
        runtime.print_double(2.5)
        self.assertEqual("hello\n-12\n2.500000\n", out.getvalue())

    def test_add_integer(self):
        self.assertEqual(5, ConsoleRuntime().add_integer(2, 3))
        self.assertEqual(-1, ConsoleRuntime().add_integer(2, -3))

    def test_abstract(self):
        self.assertRaises(TypeError, Runtime)
        self.assertRaises(TypeError, Backend)


class BackendTestCase(unittest.TestCase):

    def test_null_backend(self):
        self.assertTrue(NullBackend().generate_code([]))
        self.assertTrue(NullBackend().generate_code(parse("x = 1")))

    def test_mock_backend(self):
        out = io.StringIO()
        self.assertTrue(MockBackend(out).generate_code(parse("x = 1\nprint(x)")))
        self.assertIn("Processing 2 statement(s)", out.getvalue())
        self.assertIn("complete", out.getvalue())

        out = io.StringIO()
        self.assertFalse(MockBackend(out).generate_code(None))
        self.assertIn("No program", out.getvalue())


if __name__ == '__main__':
    unittest.main()

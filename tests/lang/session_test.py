import io
import os
import tempfile
import unittest

from panlang.lang.error import ErrorHandler, PanArithmeticError, PanNameError, PanSyntaxError, ResourceError
from panlang.lang.session import Session
from panlang.runtime.backend import MockBackend, NullBackend
from panlang.runtime.builtins import ConsoleRuntime


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, name, source):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as file:
            file.write(source)
        return path

    def file_session(self, source, **kwargs):
        return Session(ErrorHandler(stream=self.err), self.write("prog.pan", source), cmd_line=False,
                       runtime=ConsoleRuntime(self.out), **kwargs)

    def cmd_session(self, persist=None):
        return Session(ErrorHandler(stream=self.err), Session.SH_FILE, cmd_line=True, persist=persist,
                       runtime=ConsoleRuntime(self.out))

    def test_file(self):
        sess = self.file_session("# demo\nx = 2 + 3 * 4\n\nprint(x)\nprint(\"done\")\n")
        self.assertEqual("# demo\nx = 2 + 3 * 4\n\nprint(x)\nprint(\"done\")\n", sess.source)
        self.assertTrue(sess.persist)

        sess.add()
        self.assertEqual(3, len(sess.program))
        sess.run()
        self.assertEqual("14\ndone\n", self.out.getvalue())
        self.assertEqual(14, sess.environment.get("x"))

    def test_file_errors(self):
        sess = self.file_session("print(1)\nprint(1 +)")
        self.assertRaises(PanSyntaxError, sess.add)
        self.assertEqual([], sess.program)
        self.assertEqual("", self.out.getvalue())

        sess = self.file_session("print(1)\nprint(1 / 0)\nprint(2)")
        sess.add()
        self.assertRaises(PanArithmeticError, sess.run)
        self.assertEqual("1\n", self.out.getvalue())

    def test_resources(self):
        handler = ErrorHandler(stream=self.err)
        should_raise = [
            self.write("prog.txt", "print(1)"),
            os.path.join(self.tmp.name, "missing.pan"),
            self.tmp.name,
            ".pan",
        ]
        for case in should_raise:
            self.assertRaises(ResourceError, Session, handler, case, cmd_line=False)

        self.assertRaises(ResourceError, Session, handler, Session.SH_FILE, cmd_line=False)

    def test_cmd_line_resets_by_default(self):
        sess = self.cmd_session()
        self.assertFalse(sess.persist)
        self.assertFalse(sess.error_handler.fatal)

        sess.add("x = 5")
        sess.run()
        self.assertEqual([], sess.program)

        sess.add("print(x)")
        self.assertRaises(PanNameError, sess.run)
        self.assertEqual([], sess.program)

    def test_cmd_line_persist(self):
        sess = self.cmd_session(persist=True)
        for line in ["x = 5", "x = x * 2", "print(x)"]:
            sess.add(line)
            sess.run()
        self.assertEqual("10\n", self.out.getvalue())

    def test_independent_sessions(self):
        first, second = self.cmd_session(persist=True), self.cmd_session(persist=True)
        first.add("x = 1")
        first.run()
        second.add("print(x)")
        self.assertRaises(PanNameError, second.run)

    def test_compile(self):
        sess = self.file_session("x = 1\nprint(x)")
        sess.add()
        self.assertIsNone(sess.compile())

        backend_out = io.StringIO()
        sess = self.file_session("x = 1\nprint(x)", backend=MockBackend(backend_out))
        sess.add()
        sess.run()
        self.assertEqual("", backend_out.getvalue())  # running never touches the backend
        self.assertTrue(sess.compile())
        self.assertIn("Processing 2 statement(s)", backend_out.getvalue())

        sess = self.file_session("x = 1", backend=NullBackend())
        sess.add()
        self.assertTrue(sess.compile())

    def test_display(self):
        sess = self.file_session("x = 1\nprint(x)")
        sess.add()
        self.assertEqual("Assignment(expr='x = 1', nodes=[\n    NumberLiteral(expr='1')\n])\n"
                         "PrintStatement(expr='print(x)', nodes=[\n    VariableReference(expr='x')\n])",
                         sess.display())


if __name__ == '__main__':
    unittest.main()

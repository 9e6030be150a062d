import io
import unittest

from panlang.lang.error import ErrorHandler
from panlang.lang.session import Session
from panlang.lang.shell import Shell
from panlang.runtime.builtins import ConsoleRuntime


class ShellTestCase(unittest.TestCase):

    def run_shell(self, lines, persist=None):
        """Feeds lines to a fresh shell. Returns (stdout, stderr) with prompts stripped."""
        out, err = io.StringIO(), io.StringIO()
        sess = Session(ErrorHandler(stream=err), Session.SH_FILE, cmd_line=True, persist=persist,
                       runtime=ConsoleRuntime(out))

        shell = Shell(sess, stdin=io.StringIO("".join(line + "\n" for line in lines)), stdout=out)
        shell.use_rawinput = False
        shell.cmdloop(intro="")

        return out.getvalue().replace(Shell.prompt, ""), err.getvalue()

    def test_lines(self):
        out, err = self.run_shell(['print("hello")', "print(2 + 3 * 4)", "", "# comment", "exit"])
        self.assertEqual("hello\n14\nExiting PanLang REPL.\n", out)
        self.assertEqual("", err)

    def test_bindings_reset_between_lines(self):
        out, err = self.run_shell(["x = 5", "print(x)", "exit"])
        self.assertEqual("Exiting PanLang REPL.\n", out)
        self.assertIn("name error: variable 'x' is not defined", err)

    def test_bindings_persist(self):
        out, err = self.run_shell(["x = 5", "x = x + 1", "print(x)", "exit"], persist=True)
        self.assertEqual("6\nExiting PanLang REPL.\n", out)
        self.assertEqual("", err)

    def test_errors_do_not_end_session(self):
        out, err = self.run_shell(["print(1 +)", "print(1 / 0)", "print(3)", "exit"])
        self.assertEqual("3\nExiting PanLang REPL.\n", out)
        self.assertIn("<in>:1:10: syntax error", err)
        self.assertIn("arithmetic error: division by zero", err)

    def test_end_of_input(self):
        out, err = self.run_shell(["print(1)"])
        self.assertEqual("1\n\nExiting PanLang REPL.\n", out)

    def test_commands_as_source(self):
        out, err = self.run_shell(["exit = 3", "help = exit * 2", "print(help)", "exit"], persist=True)
        self.assertEqual("6\nExiting PanLang REPL.\n", out)
        self.assertEqual("", err)

    def test_help(self):
        out, __ = self.run_shell(["help", "exit"])
        self.assertIn("Welcome to PanLang!", out)
        self.assertIn("--persist", out)


if __name__ == '__main__':
    unittest.main()

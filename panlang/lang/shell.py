"""Handles interactive/command-line mode for the PanLang interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """PanLang interpreter shell. Every line is parsed and run on its own."""
    intro = "PanLang REPL :: Python backend\nType 'exit' to exit, '?' or 'help' for more information."
    prompt = ">>> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def default(self, line):
        """Executes arbitrary PanLang source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.add(line)
            self.sess.run()

    def _as_source(self, arg):
        """If a shell command has arguments, the whole line was meant as PanLang source (ex: 'exit = 1')."""
        if arg:
            self.default(self.lastcmd)
            return True
        return False

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        if self._as_source(arg):
            return
        print("Welcome to PanLang!\n\n"
              "PanLang statements are either assignments or prints. Variables hold integers, and \n"
              "expressions use +, -, * and / with the usual precedence (/ truncates toward zero).\n\n"
              "Try it out by typing 'x = 2 + 3 * 4', then 'print(x)'. Strings can only be \n"
              "printed directly: 'print(\"hello\")'.", file=self.stdout)
        if not self.sess.persist:
            print("\nNote: variables are forgotten after every line (start with --persist to keep them).",
                  file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        if self._as_source(arg):
            return False
        print("Exiting PanLang REPL.", file=self.stdout)
        return True

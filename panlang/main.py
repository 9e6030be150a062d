"""Runs .pan files or the interactive PanLang shell. Also uses the error handling context manager. Called from the
panlang executable script.
"""

import argparse

from panlang.lang.error import ErrorHandler
from panlang.lang.session import Session
from panlang.lang.shell import Shell
from panlang.runtime.backend import MockBackend


def build_parser():
    parser = argparse.ArgumentParser(prog="panlang", description="PanLang interpreter")
    parser.add_argument("file", nargs="?",
                        help=f"{Session.EXTENSION} file to run (if empty, goes to command-line mode)")
    parser.add_argument("-a", "--ast", action="store_true",
                        help="display the parsed syntax tree before running (file mode only)")
    parser.add_argument("-p", "--persist", action="store_true",
                        help="keep variable bindings from one command-line input to the next")
    parser.add_argument("-b", "--backend", action="store_true",
                        help="hand the parsed program to the (mock) code generation backend after running it "
                             "(file mode only)")
    return parser


def main(argv=None):
    """Runs PanLang interpreter. Called from panlang executable script."""
    with ErrorHandler() as error_handler:
        parser = build_parser()
        args = parser.parse_args(argv)
        if args.file is None and (args.ast or args.backend):
            parser.error("--ast and --backend only apply when running a file")

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False, backend=MockBackend() if args.backend else None)

            print(f"--- PanLang Execution from {args.file} ---")
            print(f"Input Code:\n{sess.source}")

            sess.add()
            if args.ast:
                print(f"--- Abstract Syntax Tree ({len(sess.program)} statement(s)) ---")
                print(sess.display())
                print("--- Execution Results ---")

            sess.run()

            if args.backend:
                status = "succeeded" if sess.compile() else "failed"
                print(f"Code generation {status}.")

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, persist=args.persist)).cmdloop()

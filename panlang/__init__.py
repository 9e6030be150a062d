"""PanLang interpreter.

Basic program flow:
    1. Lexer: produces tokens on demand from the source text, skipping whitespace and comments
        - see panlang/syntax/lexer.py and panlang/syntax/tokens.py
    2. Parser: recursive descent over the token stream, producing a list of statement trees
        - grammar rules are in panlang/syntax/parser.py, tree nodes in panlang/syntax/nodes.py
    3. Evaluator: walks each statement tree in order against the session's Environment
        - not a compiler, output and addition go through a Runtime (panlang/runtime/builtins.py)

panlang/lang holds the session layer: error reporting, the Session driver and the interactive shell.
"""

import sys

__version__ = "0.1.0"

# PanLang integers have no upper bound, so neither does their decimal form (Python >= 3.11 caps it by default)
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)

"""Lexical analysis for PanLang. Turns source text into a lazy stream of Tokens, pulled one at a time by the parser.

```
<number>     ::= <digit>+
<string>     ::= '"' <any char but '"'>* '"'      ; no escape sequences: a backslash never protects a quote
<identifier> ::= (<letter> | "_") (<letter> | <digit> | "_")*
<syntax>     ::= "=" | "+" | "-" | "*" | "/" | "(" | ")" | "," | ":"
<newline>    ::= <line feed>                      ; statement separator, not whitespace
<comment>    ::= "#" <any char but newline>*      ; skipped
```

Anything else is reported as a warning and skipped one character at a time.
"""

import string

from panlang.lang.error import ErrorHandler
from panlang.syntax.tokens import KEYWORDS, SYNTAX, WHITESPACE, Token, TokenKind

DIGITS = set(string.digits)
IDENT_START = set(string.ascii_letters + "_")
IDENT_CHARS = IDENT_START | DIGITS


class Lexer:
    """Pull-based token stream over a single source string."""

    def __init__(self, source, error_handler=None):
        self.source = source
        if error_handler is None:
            error_handler = ErrorHandler(fatal=False)
        self.error_handler = error_handler  # receives warnings for unrecognized characters

        self.pos = 0
        self.line = 1
        self.col = 1

    @property
    def char(self):
        """Current character, or None at end of input."""
        return self.source[self.pos] if self.pos < len(self.source) else None

    def advance(self):
        """Moves past the current character, keeping line and column up to date."""
        if self.char is None:
            return
        if self.char == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        self.pos += 1

    def skip_ignored(self):
        """Skips horizontal whitespace and comments. Stops at newlines."""
        while self.char is not None:
            if self.char in WHITESPACE:
                self.advance()
            elif self.char == "#":
                while self.char is not None and self.char != "\n":
                    self.advance()
            else:
                break

    def _scan(self, chars):
        start = self.pos
        while self.char is not None and self.char in chars:
            self.advance()
        return self.source[start:self.pos]

    def read_number(self):
        line, col = self.line, self.col
        return Token(TokenKind.NUMBER, self._scan(DIGITS), line, col)

    def read_word(self):
        """Reads an identifier, or a keyword if the word is in KEYWORDS."""
        line, col = self.line, self.col
        word = self._scan(IDENT_CHARS)
        return Token(KEYWORDS.get(word, TokenKind.IDENTIFIER), word, line, col)

    def read_string(self):
        """Reads up to the next quote or end of input. The lexeme is always rebuilt with both quotes."""
        line, col = self.line, self.col
        self.advance()  # opening quote

        start = self.pos
        while self.char is not None and self.char != '"':
            self.advance()
        contents = self.source[start:self.pos]

        self.advance()  # closing quote, if any
        return Token(TokenKind.STRING, f'"{contents}"', line, col)

    def next_token(self):
        """Returns the next valid token. Once input is exhausted, keeps returning EOF tokens."""
        while True:
            self.skip_ignored()
            char = self.char
            line, col = self.line, self.col

            if char is None:
                return Token(TokenKind.EOF, "", line, col)
            elif char in DIGITS:
                return self.read_number()
            elif char in IDENT_START:
                return self.read_word()
            elif char == '"':
                return self.read_string()
            elif char == "\n":
                self.advance()
                return Token(TokenKind.NEWLINE, "\n", line, col)
            elif char in SYNTAX:
                self.advance()
                return Token(SYNTAX[char], char, line, col)

            self.unknown(Token(TokenKind.UNKNOWN, char, line, col))
            self.advance()

    def unknown(self, token):
        """Reports an unrecognized character. The caller skips it."""
        self.error_handler.warn("unknown character '{}', skipping", token.lexeme, line=token.line, col=token.col)

    def tokens(self):
        """Generator over next_token, ending with (and including) the first EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def __iter__(self):
        return self.tokens()

"""Recursive-descent parser for PanLang. Builds the whole program's syntax tree before anything is executed.

```
program    := (statement NEWLINE*)*
statement  := "print" "(" expression ")" | IDENTIFIER "=" expression
expression := term (("+" | "-") term)*
term       := factor (("*" | "/") factor)*
factor     := NUMBER | STRING | IDENTIFIER | "(" expression ")"
```

Binary operators are left-associative. The parser keeps two tokens in view: the current one and one of lookahead,
which is what tells an assignment (`x = ...`) apart from anything else starting with an identifier.
"""

from panlang.lang.error import PanSyntaxError
from panlang.syntax import nodes
from panlang.syntax.lexer import Lexer
from panlang.syntax.tokens import TokenKind

ADDITIVE = {TokenKind.PLUS: "+", TokenKind.MINUS: "-"}
MULTIPLICATIVE = {TokenKind.TIMES: "*", TokenKind.DIVIDE: "/"}


class Parser:
    """Consumes a Lexer's tokens. First syntax error raised aborts parsing; there is no recovery."""

    def __init__(self, lexer):
        self.lexer = lexer
        self.current = lexer.next_token()
        self.peek = lexer.next_token()

    @classmethod
    def from_source(cls, source, error_handler=None):
        return cls(Lexer(source, error_handler))

    def advance(self):
        """Consumes the current token and returns it."""
        token = self.current
        self.current = self.peek
        self.peek = self.lexer.next_token()
        return token

    def expect(self, kind):
        """Consumes the current token if it is of kind, raises PanSyntaxError otherwise."""
        if self.current.kind is not kind:
            raise self.error(f"expected {kind}, got {self.current.kind} " + "('{}')")
        return self.advance()

    def error(self, msg):
        """PanSyntaxError for the current token. msg is a template with one field for the offending lexeme."""
        token = self.current
        lexeme = token.lexeme if token.kind is not TokenKind.NEWLINE else "\\n"
        return PanSyntaxError(msg, lexeme, line=token.line, col=token.col, diagnosis=bool(token.lexeme.strip()))

    def skip_newlines(self):
        while self.current.kind is TokenKind.NEWLINE:
            self.advance()

    def parse_program(self):
        """Parses every statement up to the end of input. Blank lines and comments produce no statements."""
        statements = []

        self.skip_newlines()
        while self.current.kind is not TokenKind.EOF:
            statements.append(self.parse_statement())
            self.skip_newlines()

        return statements

    def parse_statement(self):
        token = self.current

        if token.kind is TokenKind.PRINT:
            self.advance()
            self.expect(TokenKind.LPAREN)
            argument = self.parse_expression()
            self.expect(TokenKind.RPAREN)
            return nodes.PrintStatement(argument, token.line, token.col)

        elif token.kind is TokenKind.IDENTIFIER and self.peek.kind is TokenKind.ASSIGN:
            self.advance()  # identifier
            self.advance()  # =
            return nodes.Assignment(token.lexeme, self.parse_expression(), token.line, token.col)

        raise self.error(f"unexpected {token.kind} " + "'{}' at start of statement")

    def parse_expression(self):
        left = self.parse_term()

        while self.current.kind in ADDITIVE:
            operator = self.advance()
            left = nodes.BinaryOp(left, ADDITIVE[operator.kind], self.parse_term(), operator.line, operator.col)

        return left

    def parse_term(self):
        left = self.parse_factor()

        while self.current.kind in MULTIPLICATIVE:
            operator = self.advance()
            left = nodes.BinaryOp(left, MULTIPLICATIVE[operator.kind], self.parse_factor(), operator.line, operator.col)

        return left

    def parse_factor(self):
        token = self.current

        if token.kind is TokenKind.NUMBER:
            self.advance()
            return nodes.NumberLiteral(int(token.lexeme), token.line, token.col)

        elif token.kind is TokenKind.STRING:
            self.advance()
            return nodes.StringLiteral(token.lexeme[1:-1], token.line, token.col)

        elif token.kind is TokenKind.IDENTIFIER:
            self.advance()
            return nodes.VariableReference(token.lexeme, token.line, token.col)

        elif token.kind is TokenKind.LPAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenKind.RPAREN)
            return expr

        raise self.error(f"unexpected {token.kind} " + "'{}' in expression")


def parse(source, error_handler=None):
    """Parses source into a list of top-level statements."""
    return Parser.from_source(source, error_handler).parse_program()

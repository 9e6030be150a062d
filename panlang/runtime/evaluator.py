"""Tree-walking evaluation of PanLang syntax trees. Statements run in order against an Environment; all output goes
through a Runtime.
"""

import operator

from panlang.lang.error import PanArithmeticError, PanNameError, PanTypeError
from panlang.runtime.builtins import ConsoleRuntime
from panlang.syntax import nodes


def divide(dividend, divisor):
    """Integer division truncating toward zero: -7 / 2 == -3, not -4."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


class Evaluator:
    """Executes statements and evaluates expressions. Every failure is raised as a GenericException subclass."""

    def __init__(self, runtime=None):
        self.runtime = runtime if runtime is not None else ConsoleRuntime()
        self.operators = {
            "+": self.runtime.add_integer,
            "-": operator.sub,
            "*": operator.mul,
            "/": divide,
        }

    def run(self, program, env):
        """Executes each top-level statement of program, in order."""
        for statement in program:
            self.execute(statement, env)

    def execute(self, statement, env):
        if isinstance(statement, nodes.Assignment):
            env.set(statement.name, self.evaluate(statement.value, env))

        elif isinstance(statement, nodes.PrintStatement):
            argument = statement.argument
            if isinstance(argument, nodes.StringLiteral):  # only a direct string literal may be printed as text
                self.runtime.print_string(argument.text)
            else:
                self.runtime.print_integer(self.evaluate(argument, env))

        else:
            raise PanTypeError("'{}' is not a statement", statement.expr, line=statement.line, col=statement.col)

    def evaluate(self, expr, env):
        """Returns the integer value of expr."""
        if isinstance(expr, nodes.NumberLiteral):
            return expr.value

        elif isinstance(expr, nodes.StringLiteral):
            msg = "string {} cannot be evaluated as an integer expression"
            raise PanTypeError(msg, expr.expr, line=expr.line, col=expr.col)

        elif isinstance(expr, nodes.VariableReference):
            if expr.name not in env:
                raise PanNameError("variable '{}' is not defined", expr.name, line=expr.line, col=expr.col)
            return env.get(expr.name)

        elif isinstance(expr, nodes.BinaryOp):
            # left operands are folded in a loop, only right operands recurse
            chain, operand = expr.spine()
            value = self.evaluate(operand, env)
            for binop in chain:
                value = self.apply(binop, value, self.evaluate(binop.right, env))
            return value

        raise PanTypeError("'{}' is not an expression", expr.expr, line=expr.line, col=expr.col)

    def apply(self, binop, left, right):
        """Applies binop's operator to already evaluated operands."""
        if binop.operator == "/" and right == 0:
            msg = "division by zero in '{}'"
            raise PanArithmeticError(msg, binop.expr, line=binop.line, col=binop.col, diagnosis=False)
        return self.operators[binop.operator](left, right)

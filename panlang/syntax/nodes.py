"""PanLang abstract syntax tree.

```
<statement>  ::= <Assignment> | <PrintStatement>        ; only valid top-level nodes
<expression> ::= <NumberLiteral> | <StringLiteral> | <VariableReference> | <BinaryOp>
```

Each node keeps `nodes`, its children, and a `key`: the literal value, name or operator that tells it apart from other
nodes of its kind. `expr`, a canonical rendering of the node's source with only the parentheses that precedence
requires, is computed on demand for display and error messages. Two nodes are equal if they are the same kind of node
with the same key and children; source positions are carried for error messages only.
"""

from abc import abstractmethod, ABC


class Node(ABC):
    """Superclass that represents any node of a PanLang syntax tree."""

    def __init__(self, nodes=None, line=None, col=None):
        self.nodes = nodes if nodes is not None else []
        self.line = line  # position of the token that started this node
        self.col = col
        self._cls = type(self).__name__

    @property
    @abstractmethod
    def key(self):
        """Value, name or operator of this node. Compared by __eq__ along with the node's kind and children."""

    @abstractmethod
    def render(self):
        """Returns this node's canonical source rendering."""

    @property
    def expr(self):
        return self.render()

    def display(self, indents=0):
        """Recursively displays the syntax tree with readable format.

        Format:
        <Node>(expr='<expr>', nodes=[
            <Node>(expr='<expr>', nodes=[
                ...
                <Node>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.display()

    def __eq__(self, other):
        pending = [(self, other)]  # explicit stack, long operator chains are deep on the left
        while pending:
            node, other = pending.pop()
            if not isinstance(other, type(node)) or node.key != other.key or len(node.nodes) != len(other.nodes):
                return False
            pending.extend(zip(node.nodes, other.nodes))
        return True


class Expression(Node):
    """Any node that evaluates to a value."""
    precedence = 3  # atoms bind tightest


class Statement(Node):
    """Any node that may appear at the top level of a program."""


class NumberLiteral(Expression):

    def __init__(self, value, line=None, col=None):
        super().__init__(line=line, col=col)
        self.value = value

    @property
    def key(self):
        return self.value

    def render(self):
        return str(self.value)


class StringLiteral(Expression):
    """Quoted text. Only valid as the direct argument of a print statement."""

    def __init__(self, text, line=None, col=None):
        super().__init__(line=line, col=col)
        self.text = text

    @property
    def key(self):
        return self.text

    def render(self):
        return f'"{self.text}"'


class VariableReference(Expression):

    def __init__(self, name, line=None, col=None):
        super().__init__(line=line, col=col)
        self.name = name

    @property
    def key(self):
        return self.name

    def render(self):
        return self.name


class BinaryOp(Expression):
    """Left operand, operator, right operand. Parsed left-associatively."""
    PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}

    def __init__(self, left, operator, right, line=None, col=None):
        if operator not in BinaryOp.PRECEDENCE:
            raise ValueError(f"unknown binary operator '{operator}'")
        super().__init__([left, right], line, col)
        self.operator = operator

    @property
    def key(self):
        return self.operator

    @property
    def precedence(self):
        return BinaryOp.PRECEDENCE[self.operator]

    @property
    def left(self):
        return self.nodes[0]

    @property
    def right(self):
        return self.nodes[1]

    def spine(self):
        """Returns the chain of BinaryOps down the left side of this one, innermost first, and the operand below it."""
        chain = []
        node = self
        while isinstance(node, BinaryOp):
            chain.append(node)
            node = node.left
        chain.reverse()
        return chain, node

    def render(self):
        chain, left = self.spine()
        rendered = left.render()

        for binop in chain:
            # right operands of equal precedence need parentheses: a - (b - c) != a - b - c
            if left.precedence < binop.precedence:
                rendered = f"({rendered})"
            right = binop.right.render()
            if binop.right.precedence <= binop.precedence:
                right = f"({right})"

            rendered = f"{rendered} {binop.operator} {right}"
            left = binop

        return rendered


class Assignment(Statement):
    """<name> = <expression>"""

    def __init__(self, name, value, line=None, col=None):
        super().__init__([value], line, col)
        self.name = name

    @property
    def key(self):
        return self.name

    @property
    def value(self):
        return self.nodes[0]

    def render(self):
        return f"{self.name} = {self.value.expr}"


class PrintStatement(Statement):
    """print(<expression>)"""

    def __init__(self, argument, line=None, col=None):
        super().__init__([argument], line, col)

    @property
    def key(self):
        return None

    @property
    def argument(self):
        return self.nodes[0]

    def render(self):
        return f"print({self.argument.expr})"

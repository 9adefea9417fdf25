from .expr import Constant, Variable


def node_repr(expr):
    if isinstance(expr, Constant):
        return f"{type(expr).__name__} {expr.value}"
    if isinstance(expr, Variable):
        return f"{type(expr).__name__} {expr.id!r}"
    return f"{type(expr).__name__} ({expr.symbol})"


class PPrinter:
    """Dumps an expression tree one node per line, children indented."""

    def __init__(self, width=4):
        self.width = width
        self.global_indent = ""
        self.global_indent_level = 0

    def indent(self):
        self.global_indent_level += self.width
        self.global_indent = self.global_indent_level * " "
        return ""

    def outdent(self):
        self.global_indent_level -= self.width
        self.global_indent = self.global_indent_level * " "
        return ""

    def nl(self):
        return "\n"

    def pformat(self, expr):
        return self._visit(expr).rstrip(self.nl())

    def _visit(self, expr):
        out = f"{self.global_indent}{node_repr(expr)}{self.nl()}{self.indent()}"
        for child in expr.children:
            out += self._visit(child)
        return out + self.outdent()


def pformat(expr):
    return PPrinter().pformat(expr)

"""A tiny interpreter for sums and differences of one-letter variables."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping


class Expression(ABC):
    """A node of an expression tree."""

    @abstractmethod
    def interpret(self, variables: Mapping[str, int]) -> int:
        """Evaluate the expression with the given variable values."""


class VarExpression(Expression):
    """A variable; an unknown one counts as zero."""

    def __init__(self, key: str) -> None:
        self.key = key

    def interpret(self, variables: Mapping[str, int]) -> int:
        return variables.get(self.key, 0)


class SymbolExpression(Expression):
    """An operator with a left and a right operand."""

    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right


class AddExpression(SymbolExpression):
    def interpret(self, variables: Mapping[str, int]) -> int:
        return self.left.interpret(variables) + self.right.interpret(variables)


class SubExpression(SymbolExpression):
    def interpret(self, variables: Mapping[str, int]) -> int:
        return self.left.interpret(variables) - self.right.interpret(variables)


_OPERATORS: dict[str, type[SymbolExpression]] = {
    "+": AddExpression,
    "-": SubExpression,
}


def analyse(text: str) -> Expression:
    """Parse text such as 'a+b-c' into an expression tree."""
    stack: list[Expression] = []
    chars = iter(text)
    for char in chars:
        operator = _OPERATORS.get(char)
        if operator is None:
            stack.append(VarExpression(char))
            continue
        if not stack:
            raise ValueError(f"operator {char!r} has no left operand")
        try:
            operand = next(chars)
        except StopIteration:
            raise ValueError(f"operator {char!r} has no right operand") from None
        stack.append(operator(stack[-1], VarExpression(operand)))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def main(argv: list[str] | None = None) -> int:
    """Evaluate a sample expression and print the result."""
    if argv is None:
        argv = sys.argv[1:]
    variables = {"a": 5, "b": 2, "c": 1, "d": 6, "e": 10}
    print(analyse("a+b-c+d-e").interpret(variables))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
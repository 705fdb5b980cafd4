"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from monkeylang.token import Token


class Node:
    """Base of every syntax tree node."""

    token: Token

    def token_literal(self) -> str:
        """Return the literal of the token this node starts with."""
        return self.token.literal


class Statement(Node):
    """A node that stands on its own in a program."""


class Expression(Node):
    """A node that produces a value."""


@dataclass
class Program(Node):
    """The root node: an ordered list of statements."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        return self.statements[0].token_literal() if self.statements else ""

    def __str__(self) -> str:
        return "".join(str(stmt) for stmt in self.statements)


@dataclass
class Identifier(Expression):
    """A name such as ``x`` or ``add``."""

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


@dataclass
class LetStatement(Statement):
    """``let <name> = <value>;``"""

    token: Token
    name: Identifier
    value: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        value = "" if self.value is None else str(self.value)
        return f"{self.token_literal()} {self.name} = {value};"


@dataclass
class ReturnStatement(Statement):
    """``return <value>;``"""

    token: Token
    return_value: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        value = "" if self.return_value is None else str(self.return_value)
        return f"{self.token_literal()} {value};"


@dataclass
class ExpressionStatement(Statement):
    """A statement consisting of a single expression."""

    token: Token
    expression: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return "" if self.expression is None else str(self.expression)


@dataclass
class IntegerLiteral(Expression):
    """An integer constant."""

    token: Token
    value: int

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpression(Expression):
    """``<operator><right>``, such as ``-x`` or ``!ok``."""

    token: Token
    operator: str
    right: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression(Expression):
    """``<left> <operator> <right>``, such as ``a + b``."""

    token: Token
    left: Expression
    operator: str
    right: Optional[Expression] = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"
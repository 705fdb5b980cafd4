# monkeylang

A lexer, syntax tree node classes and an interactive token-printing prompt
for the Monkey programming language.

## Installation

```
pip install .
```

## The interactive prompt

```
monkey
```

The command greets you by your user name and then shows the `>> ` prompt.
Each line you type is split into tokens, and every token is printed on a
line of its own. Press end-of-file (Ctrl-D) to leave.

```
>> let x = 5;
{Type:LET Literal:let}
{Type:IDENT Literal:x}
{Type:= Literal:=}
{Type:INT Literal:5}
{Type:; Literal:;}
```

You can also run the prompt from your own code with any pair of text
streams:

```python
import io
from monkeylang.repl import start

out = io.StringIO()
start(io.StringIO("1 + 2\n"), out)
print(out.getvalue())
```

## Tokenising

```python
from monkeylang.lexer import Lexer

for tok in Lexer("let five = 5;"):
    print(tok.type, tok.literal)
```

Iterating over a `Lexer` yields tokens up to, but not including, the end of
input. `Lexer.next_token()` returns one token at a time; once the input is
used up it keeps returning a token of type `TokenType.EOF`. Characters the
language does not know come back as `TokenType.ILLEGAL` tokens.

`monkeylang.token` holds the `TokenType` enum, the frozen `Token` dataclass
(`type` and `literal`), and `lookup_ident()`, which maps the keywords `fn`,
`let`, `true`, `false`, `if`, `else` and `return` to their token types and
every other word to `TokenType.IDENT`.

## Syntax tree nodes

`monkeylang.nodes` defines the node classes `Program`, `LetStatement`,
`ReturnStatement`, `ExpressionStatement`, `Identifier`, `IntegerLiteral`,
`PrefixExpression` and `InfixExpression`. Each has `token_literal()`, and
`str()` of a node prints it in fully parenthesised form:

```python
from monkeylang.nodes import Identifier, InfixExpression, Program, ExpressionStatement
from monkeylang.token import Token, TokenType

a = Identifier(Token(TokenType.IDENT, "a"), "a")
b = Identifier(Token(TokenType.IDENT, "b"), "b")
plus = InfixExpression(Token(TokenType.PLUS, "+"), a, "+", b)
program = Program([ExpressionStatement(plus.token, plus)])
print(program)  # (a + b)
```

## What the package does not do

The package does not turn tokens into a syntax tree: there is no parser, so
node objects have to be built by hand as above. Nor does it evaluate
programs; the prompt only shows the tokens of each line.

## Running the tests

```
pip install ".[test]"
pytest
```
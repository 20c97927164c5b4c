"""
JavaScript AST Node Kinds.

The closed set of node kinds the class conversion understands. Kinds outside
the legacy class encoding (loops, operators, literals other than numbers and
strings) are not modelled individually; hosts map them onto the nearest
structural kind since the pass only inspects the kinds listed here.
"""

from enum import Enum


class Token(str, Enum):
  """Kind tag carried by every node of a `SyntaxTree`."""

  # Containers
  ROOT = "root"
  SCRIPT = "script"
  BLOCK = "block"

  # Expressions
  NAME = "name"
  STRING = "string"  # Property name inside a GETPROP
  NUMBER = "number"
  THIS = "this"
  GETPROP = "getprop"  # a.b
  ASSIGN = "assign"
  CALL = "call"
  OBJECTLIT = "objectlit"
  STRING_KEY = "string_key"  # { key: value }
  FUNCTION = "function"
  PARAM_LIST = "param_list"
  EMPTY = "empty"

  # Statements
  EXPR_RESULT = "expr_result"
  RETURN = "return"
  VAR = "var"
  LET = "let"
  CONST = "const"

  # ES6 classes
  CLASS = "class"
  CLASS_MEMBERS = "class_members"
  MEMBER_FUNCTION_DEF = "member_function_def"


# Kinds carrying a string payload on the node itself.
STRING_TOKENS = frozenset(
  {
    Token.NAME,
    Token.STRING,
    Token.NUMBER,
    Token.STRING_KEY,
    Token.MEMBER_FUNCTION_DEF,
  }
)

NAME_DECLARATIONS = frozenset({Token.VAR, Token.LET, Token.CONST})

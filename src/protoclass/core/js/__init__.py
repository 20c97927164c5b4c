"""
In-memory JavaScript AST.

An arena tree (`SyntaxTree`) with a closed set of node kinds (`Token`),
documentation metadata (`JSDocInfo`), a node factory (`IR`) and the structural
queries used by the class conversion.
"""

from protoclass.core.js.ir import IR
from protoclass.core.js.jsdoc import JSDocInfo
from protoclass.core.js.tokens import Token
from protoclass.core.js.tree import Node, NodeId, SourcePosition, SyntaxTree, TreeStructureError

__all__ = [
  "IR",
  "JSDocInfo",
  "Node",
  "NodeId",
  "SourcePosition",
  "SyntaxTree",
  "Token",
  "TreeStructureError",
]

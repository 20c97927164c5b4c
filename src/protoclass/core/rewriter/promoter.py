"""
Constructor Promotion.

Rewrites a `@constructor` function into a class declaration holding a single
`constructor` member::

    /** @constructor @extends {Base} */
    function A(x) { this.x = x; }

becomes::

    class A extends Base {
      /** @constructor @extends {Base} */
      constructor(x) { this.x = x; }
    }

The documentation block moves onto the constructor member so parameter types
survive. Anonymous constructors (`var A = function() {}`) become anonymous
class expressions in place (`var A = class {}`) and are registered under the
name of their binding.
"""

import re
from typing import List, Optional

from protoclass.config import RuntimeConfig
from protoclass.core.js.ir import IR
from protoclass.core.js.jsdoc import JSDocInfo
from protoclass.core.js.node_util import get_binding_name
from protoclass.core.js.qualified_names import build
from protoclass.core.js.tokens import Token
from protoclass.core.js.tree import NodeId, SyntaxTree
from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.registry import ClassRegistry

_TEMPLATE_ARGS = re.compile(r"<.*>$", re.DOTALL)


def normalize_type_reference(text: str, config: RuntimeConfig) -> str:
  """
  Reduces an `@extends` type reference to a plain dotted name.

  Steps, in order:

  1. strip surrounding whitespace
  2. strip one leading qualifier listed in `config.non_null_prefixes` (`!a.B` -> `a.B`)
  3. if `config.strip_template_arguments`, drop a trailing `<...>` (`B<T>` -> `B`)

  Args:
      text: Reference as written in the documentation block.
      config: Runtime configuration.

  Returns:
      str: The dotted class name.
  """
  ref = text.strip()
  # Longest first, so "!!" style markers are not half-stripped.
  for prefix in sorted(config.non_null_prefixes, key=len, reverse=True):
    if ref.startswith(prefix):
      ref = ref[len(prefix) :].lstrip()
      break
  if config.strip_template_arguments:
    ref = _TEMPLATE_ARGS.sub("", ref).rstrip()
  return ref


def promote_constructor(
  tree: SyntaxTree,
  function: NodeId,
  jsdoc: JSDocInfo,
  registry: ClassRegistry,
  context: RewriterContext,
) -> Optional[NodeId]:
  """
  Replaces a constructor function by an equivalent class declaration.

  A constructor whose name is already registered in this file is reported as
  ClassRedefined and left untouched.

  Args:
      tree: The tree being rewritten.
      function: FUNCTION node carrying constructor metadata.
      jsdoc: Its documentation block.
      registry: Classes of the current file.
      context: Shared rewriter state.

  Returns:
      Optional[NodeId]: The new CLASS node, or None if the constructor was rejected.
  """
  class_name = get_binding_name(tree, function)
  if class_name and class_name in registry:
    registry.register(class_name, function)
    return None

  before = tree.dump(function)
  ir = IR(tree)

  name, params, body = _split_function(tree, function)
  if not tree.string(name):
    name = ir.empty()

  superclass = ir.empty()
  if jsdoc.base_type:
    superclass_name = normalize_type_reference(jsdoc.base_type, context.config)
    if superclass_name:
      superclass = build(tree, superclass_name)

  constructor = ir.member_function_def(
    "constructor",
    ir.function(ir.name(""), params, body),
    jsdoc=jsdoc,
  )
  class_node = ir.class_(
    name,
    superclass,
    ir.class_members([constructor]),
    position=tree.node(function).position,
  )

  tree.replace_with(function, class_node)
  context.report_code_change(f"Promoted constructor {class_name or '<anonymous>'}", before, tree.dump(class_node))

  if class_name:
    registry.register(class_name, class_node)
  return class_node


def _split_function(tree: SyntaxTree, function: NodeId) -> List[NodeId]:
  """Detaches and returns the [NAME, PARAM_LIST, BLOCK] children of a function."""
  parts = tree.detach_children(function)
  tokens = [tree.token(p) for p in parts]
  if tokens != [Token.NAME, Token.PARAM_LIST, Token.BLOCK]:
    # Put the children back before failing so the tree stays intact.
    for part in parts:
      tree.add_child_to_back(function, part)
    raise ValueError(f"Malformed function node: {tree.dump(function)}")
  return parts

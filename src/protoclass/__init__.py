"""
protoclass Package.

Converts legacy prototype-based JavaScript classes (a `@constructor` function
plus `X.prototype.m = function` assignments) into native class declarations,
working on an in-memory syntax tree supplied by the host.

Usage
-----

.. code-block:: python

    from protoclass import IR, JSDocInfo, SyntaxTree, convert

    tree = SyntaxTree()
    ir = IR(tree)
    ctor = ir.function(ir.name("A"), ir.param_list(), ir.block(),
                       jsdoc=JSDocInfo(is_constructor=True))
    method = ir.expr_result(
      ir.assign(ir.getprop(ir.name("A"), "prototype", "foo"), ir.anonymous_function())
    )
    tree.add_child_to_back(tree.root, ir.script(ctor, method, source_file="a.js"))

    result = convert(tree)
    print(tree.dump())
    # (root (script (class (name A) (empty) (class_members ...))))

Advanced Usage (Engine)
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from protoclass import ConversionEngine, RuntimeConfig

    engine = ConversionEngine(config=RuntimeConfig(strict_mode=True))
    res = engine.run(tree)
    for diagnostic in res.diagnostics:
        print(diagnostic.describe())
"""

from typing import Optional

from protoclass.config import RuntimeConfig
from protoclass.core.conversion_result import ConversionResult
from protoclass.core.diagnostics import Diagnostic, DiagnosticKind
from protoclass.core.engine import ConversionEngine
from protoclass.core.js import IR, JSDocInfo, SyntaxTree, Token
from protoclass.core.rewriter.passes import ClassConversionPass

__version__ = "0.1.0"


def convert(tree: SyntaxTree, strict: bool = False, config: Optional[RuntimeConfig] = None) -> ConversionResult:
  """
  Converts the legacy classes of every script in `tree`, in place.

  Args:
      tree (SyntaxTree): Program whose root holds SCRIPT nodes.
      strict (bool): If True, any diagnostic fails the conversion.
      config (RuntimeConfig, optional): Full configuration; `strict` is ignored when given.

  Returns:
      ConversionResult: Changes, diagnostics and trace of the run.

  Raises:
      ValueError: If the conversion fails (aborted run, or diagnostics in strict mode).
  """
  engine = ConversionEngine(config=config or RuntimeConfig(strict_mode=strict))
  result = engine.run(tree)

  if not result.success:
    messages = result.errors + [d.describe() for d in result.diagnostics]
    error_msg = "\n".join(messages)
    raise ValueError(f"Class conversion failed:\n{error_msg}")

  return result


__all__ = [
  "ClassConversionPass",
  "ConversionEngine",
  "ConversionResult",
  "Diagnostic",
  "DiagnosticKind",
  "IR",
  "JSDocInfo",
  "RuntimeConfig",
  "SyntaxTree",
  "Token",
  "convert",
  "__version__",
]

"""
Transformation Passes Package.
"""

from protoclass.core.rewriter.passes.class_conversion import ClassConversionPass

__all__ = [
  "ClassConversionPass",
]

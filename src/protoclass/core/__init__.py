"""
Core conversion machinery: the JavaScript AST, the rewriter and the engine.
"""

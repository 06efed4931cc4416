"""
Core matrix primitives: error taxonomy, domain value objects and the
arithmetic engine.

This package has no I/O and no global state.
"""

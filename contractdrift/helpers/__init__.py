"""
Helpers package.

Stdlib-only utilities (pure, stateless) shared by every layer.
"""

"""Implementation package for the semiplane geometry kernel.

Modules here are internal; import public names from ``semiplane``.
"""

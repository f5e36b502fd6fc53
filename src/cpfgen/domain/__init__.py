"""Domain layer: CPF arithmetic and menu parsing.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""

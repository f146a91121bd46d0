"""Domain layer: symbol table, conversion rules, and errors.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""

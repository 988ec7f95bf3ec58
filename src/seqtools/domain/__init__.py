"""Domain layer: the sequence utility library.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""

"""Domain layer — value normalization and numeric kinds.

This layer depends only on stdlib.
It must never import from rules, config, output, or commands.
"""

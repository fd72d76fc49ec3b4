"""Domain layer — the interval value, its text codec, and native adapters.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""

"""Domain layer: duration codec, date directives, and error types.

This layer depends only on the standard library.
It must never import from services, commands, output, or config.
"""

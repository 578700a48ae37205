"""Domain layer — the four drills as plain functions and small types.

This layer depends only on the standard library.
It must never import from services, infrastructure, commands, or config.
"""

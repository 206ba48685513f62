"""Domain layer — evaluators, formatters, and errors.

This layer depends only on stdlib (pydantic is used for context
normalisation only). It must never import from services or config.
"""

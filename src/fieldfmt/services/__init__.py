"""Service layer — caller-facing rendering returning RenderResult.

Services may import from the domain layer.
They must never import from config.
"""

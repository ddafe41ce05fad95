"""Infrastructure layer — snapshot storage, image import, workspace.

This layer depends on stdlib and the domain layer.
It must never import from services, commands, or output.
"""

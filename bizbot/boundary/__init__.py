"""
Boundary layer.

Adapters for external collaborators: model providers and the knowledge store.
"""

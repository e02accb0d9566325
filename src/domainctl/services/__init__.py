"""Service layer — catalog queries and copy sessions.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""

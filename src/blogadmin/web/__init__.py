"""Web adapter: FastAPI app, controllers, and request-scoped collaborators.

This layer may import from every other layer; nothing imports from it
except the ``serve`` command.
"""

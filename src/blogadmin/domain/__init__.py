"""Domain layer: identifiers, entities, and roles.

This layer depends only on the standard library.
It must never import from ports, services, infrastructure, web, or commands.
"""

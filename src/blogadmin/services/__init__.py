"""Service layer: business operations returning ServiceResult.

Services may import from domain, ports, config, and infrastructure layers.
They must never import from web, commands, or output.
"""

"""Infrastructure layer: database, repositories, and template rendering.

This layer depends on stdlib and third-party libs (SQLAlchemy, Jinja2).
Repositories translate between table rows and domain entities.
"""

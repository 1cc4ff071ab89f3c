"""FastAPI transport layer for pyncg.

Request models and routes over the service layer; no domain logic.

The ``create_app()`` factory is lazily imported so that
``import pyncg.api`` never forces a FastAPI dependency.
"""


def create_app(defaults=None):
    """Deferred import of the FastAPI application factory."""
    from pyncg.api.app import create_app as _create_app

    return _create_app(defaults)

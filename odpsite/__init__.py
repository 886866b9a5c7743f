"""Pages, components, a WSGI app and a static-site builder for the Open Device Partnership website."""

__version__ = "0.1.0"
__all__ = ["app", "components", "pages"]
"""Storefront product catalog.

A server-rendered FastAPI application managing a catalog of products, with
request-scoped locales, session authentication and featured image uploads.
"""

__version__ = "0.1.0"

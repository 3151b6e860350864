"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """Another product already holds the requested name."""


class ProductNotFound(Exception):
    """The requested product does not exist."""


class InvalidProductData(Exception):
    """The request passed schema validation but cannot be applied.

    Raised for an update that supplies neither a category nor a name.
    """

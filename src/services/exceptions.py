"""
Service-level exceptions.

This module contains exceptions that can be raised by various services
in the application.
"""

class InvalidProfileError(ValueError):
    """Raised when cycle data cannot be used to derive a phase."""
    pass

class ProfileNotFoundError(Exception):
    """Raised when a user has not created a PCOS profile yet."""
    pass

class AIServiceError(Exception):
    """Raised when an AI completion fails or returns unusable content."""
    pass

class FridgeScanError(Exception):
    """Raised when the fridge image extraction fails or times out."""
    pass

class GroceryListNotFoundError(Exception):
    """Raised when a grocery list or list item does not exist for the user."""
    pass

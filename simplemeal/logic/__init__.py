"""Core business logic layer.

Subpackages:
- entitlement: subscription limits on planning
- library: item catalog and meal composition
- shopping: building shopping lists from the meal plan
- exchange: deep-link share/import codec
- reporting: text and CSV renderings for sharing
"""
__all__ = ["entitlement", "library", "shopping", "exchange", "reporting"]

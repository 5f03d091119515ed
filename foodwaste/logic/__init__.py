"""Core evaluation logic layer.

Subpackages:
- recipes: recipe feasibility against a FoodStorage
- storage: storage analysis helpers (expiry snapshots)
"""
__all__ = ["recipes", "storage"]

"""
Core domain models, geometric primitives, and input contracts.

This module contains the building blocks that the boresight formula is
assembled from; nothing here depends on the formula's tuning constants.
"""

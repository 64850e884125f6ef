"""
Test suite for antenna-boresight

Contains:
- tests/unit/          : Unit tests for individual modules
"""

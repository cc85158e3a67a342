"""
Test suite for almagest

Contains:
- tests/unit/          : Unit tests for quantities, safeguards and ellipse geometry
"""

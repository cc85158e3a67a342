"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of almagest: typed
physical quantities and the static geometry of conic-section orbits.
"""

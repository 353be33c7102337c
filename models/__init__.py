"""
models/ - Domain Layer
=======================
Immutable domain objects: members, their houses and titles,
and salary summary statistics.
"""

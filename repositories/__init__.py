"""
repositories/ - Query Layer
============================
Each repository answers read-only questions about an injected collection
of domain objects and returns domain model objects.
"""

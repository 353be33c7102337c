"""
services/ - Business Logic Layer
=================================
Reports, exports and charts built on the member repository.
Services receive the repository at construction and never touch the roster directly.
"""

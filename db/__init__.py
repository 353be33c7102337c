"""
db/ - Data Source Layer
========================
Provides the member roster, either built in or loaded from a CSV file.
This layer is the lowest in the architecture and depends only on the domain models.
"""

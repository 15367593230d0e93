"""
db/ - Database Layer
====================
Holds the record store adapter (the single database connection),
and schema initialization for PostgreSQL and SQLite.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

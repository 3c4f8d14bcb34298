"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool and hands out connections to repositories.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive the shared RecordStore handle, and map raw rows to domain model objects.
"""

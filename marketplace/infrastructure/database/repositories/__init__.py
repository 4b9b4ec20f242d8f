"""SQLAlchemy-backed repository implementations.

Modules are imported by full path; the domain packages they depend on import
them lazily, so nothing is re-exported here.
"""

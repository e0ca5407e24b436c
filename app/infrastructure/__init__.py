"""
Infrastructure layer package.

PostgreSQL adapters implementing the domain repository ports, and the
async engine they share.
"""

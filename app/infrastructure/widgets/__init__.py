"""
PostgreSQL adapters for the widgets bounded context.
"""

"""
PostgreSQL adapters for the orders bounded context.
"""

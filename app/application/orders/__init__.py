"""
Application layer for the orders bounded context.

The order service enforces creation rules and the status state
machine. No framework or infrastructure imports allowed.
"""

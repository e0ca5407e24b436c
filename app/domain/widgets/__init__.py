"""
Widgets bounded context: domain layer.
"""

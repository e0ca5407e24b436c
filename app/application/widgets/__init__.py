"""
Application layer for the widgets bounded context.
"""

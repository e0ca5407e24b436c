"""
Orders bounded context: domain layer.

Order entity, the status transition map, order errors,
and the repository port.
"""

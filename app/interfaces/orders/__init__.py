"""
HTTP interface for orders: schemas, controller, router.
"""

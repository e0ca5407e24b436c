"""
HTTP interface for widgets: schemas, controller, router.
"""

"""
Domain layer package.

Entities, business constants, domain errors and repository ports for
orders and widgets. No framework imports, no IO.
"""

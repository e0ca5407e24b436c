"""
Interfaces layer package.

Contains FastAPI routers, controllers, Pydantic request/response schemas
and input validation. No business logic belongs here.
Routes call controllers, controllers call use cases and build envelopes.
"""

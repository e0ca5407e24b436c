"""
Order Desk: order and widget management HTTP API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - orders: Order lifecycle (creation, status state machine, deletion).
    - widgets: Named catalogue entries with plain CRUD.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (PostgreSQL) implementing domain ports.
    - interfaces: FastAPI routers, controllers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, envelope, HTTP middleware, logging).
"""

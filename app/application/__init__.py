"""
Application layer package.

Services that orchestrate domain rules over repository ports, plus the
DTOs they accept and return. Depends on domain ports, never on
infrastructure.
"""

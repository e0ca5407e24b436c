"""
Shared module package.

Cross-cutting concerns used by both bounded contexts:
- Error taxonomy, handler chain and registry
- Response envelope and pagination rules
- HTTP middleware and rate limiting
- Logging configuration
"""

"""
Shared HTTP plumbing: middleware and rate limiting.
"""

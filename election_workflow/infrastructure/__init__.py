"""
Infrastructure layer - Adapters for election application ports.

This layer contains:
- adapters: production implementations of ports
- stubs: in-memory implementations for development and testing
- observability: structlog configuration and election log context
"""

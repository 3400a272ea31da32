"""
Application layer - Use cases orchestrating the election domain.

This layer contains:
- Ports (abstract interfaces for infrastructure)
- Services (access gate, election service, election directory)

Import rules: may import from domain and config; infrastructure imports
are limited to observability.
"""

"""Core: contracts, domain types, configuration and services.

The core depends on abstractions; file access and decorators live in `adapters`.
"""

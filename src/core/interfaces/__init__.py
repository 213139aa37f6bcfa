"""Core interfaces.

Why:
- Contracts (Protocol) that concrete adapters implement.
- Services depend on these abstractions, never on subprocess directly.
"""

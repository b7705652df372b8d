"""Core utilities and shared primitives.

Modules in this package stay framework-agnostic where possible and focus on
configuration, outbound HTTP, file access and small text helpers.
"""

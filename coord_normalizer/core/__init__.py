"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: WGS 84 bounds, field conventions, query box limits
- exceptions: Custom exception hierarchy
"""

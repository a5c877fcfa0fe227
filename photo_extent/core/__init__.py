"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants for the sexagesimal layout and the sphere
- exceptions: Custom exception hierarchy
"""

"""
Planar CLI - Command-line interface for the geometry language.

This package provides a CLI for evaluating geometry programs from files
or stdin without writing Python.

Usage:
    planar-cli eval program.json
    planar-cli eval --envelope program.yaml
    planar-cli commands
"""

__version__ = "1.0.0"

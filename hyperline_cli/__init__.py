"""
Hyperline CLI - Command-line interface for point checks.

This package is the shell around the geometry core: it parses numbers,
fills a GeometryRegistry and renders what the registry returns.

Usage:
    hyperline-cli --config config/scene_example.yaml show
    hyperline-cli --config config/scene_example.yaml check
    hyperline-cli --line 0 1 1 check --point 3 -3
"""

__version__ = "1.0.0"

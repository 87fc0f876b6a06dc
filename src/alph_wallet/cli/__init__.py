"""CLI layer: argument parsing, output rendering, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and the library facade, but no other layer may
import from ``cli``.
"""

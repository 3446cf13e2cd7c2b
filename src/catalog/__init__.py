"""Product catalog backend.

This package contains the catalog domain (products and categories), the
services that orchestrate it, and the infrastructure around them: database
sessions, configuration, logging, the HTTP API and a small CLI.
"""

__version__ = "0.1.0"

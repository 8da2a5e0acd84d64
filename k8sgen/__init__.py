"""k8sgen - Kubernetes definition generator.

Renders Jinja2 templates into gen/<cluster>/<namespace>/<name>/ from a small
set of deployment parameters.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]

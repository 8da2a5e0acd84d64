"""Error types raised by the generator."""

from __future__ import annotations


class K8sgenError(Exception):
    """Base class for all generation failures."""


class MissingArgumentError(K8sgenError):
    """Raised when a required parameter was not supplied."""


class MalformedClusterError(K8sgenError, ValueError):
    """Raised when a cluster value is not in PROVIDER_ZONE form."""


class MissingTemplatesError(K8sgenError):
    """Raised when no template file was given."""


class PortSpecError(K8sgenError, ValueError):
    """Raised when a ports value cannot be parsed."""


class TemplateParseError(K8sgenError):
    """Raised when a template or its directive line is invalid."""


class TemplateRenderError(K8sgenError):
    """Raised when a parsed template fails to render."""

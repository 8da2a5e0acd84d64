"""Render context construction from CLI parameters."""

from __future__ import annotations

import logging
from typing import Iterable

from ..core.errors import MalformedClusterError, MissingArgumentError
from ..core.models import PortMapping, RenderContext
from .ports import parse_ports

logger = logging.getLogger(__name__)

CLUSTER_SEPARATOR = "_"


def require(**values: str | None) -> None:
    """Fail on the first parameter that is missing or empty."""
    for option, value in values.items():
        if value is None or value == "":
            raise MissingArgumentError(f"Missing required parameter: --{option}")


def split_cluster(cluster: str) -> tuple[str, str]:
    """Split ``PROVIDER_ZONE`` on the first underscore.

    Returns:
        Tuple of (provider, zone)
    """
    provider, sep, zone = cluster.partition(CLUSTER_SEPARATOR)
    if not sep:
        raise MalformedClusterError(
            f"Cluster must be PROVIDER{CLUSTER_SEPARATOR}ZONE, got: {cluster!r}"
        )
    return provider, zone


def collect_ports(specs: Iterable[str]) -> list[PortMapping]:
    """Accumulate mappings from every occurrence of the ports option."""
    ports: list[PortMapping] = []
    for spec in specs:
        parse_ports(spec, ports)
    return ports


def build_context(
    cluster: str | None,
    namespace: str | None,
    name: str | None,
    image: str = "",
    port_specs: Iterable[str] = (),
) -> RenderContext:
    """Build the rendering context shared by all templates.

    Args:
        cluster: Cluster in PROVIDER_ZONE form
        namespace: Target namespace
        name: Resource name
        image: Container image
        port_specs: Raw values of each ports option occurrence

    Returns:
        Validated render context
    """
    require(cluster=cluster, namespace=namespace, name=name)

    provider, zone = split_cluster(cluster)  # type: ignore[arg-type]
    ports = collect_ports(port_specs)

    logger.debug(
        f"Context: cluster={cluster} namespace={namespace} name={name} "
        f"image={image!r} ports={len(ports)}"
    )

    return RenderContext(
        cluster=cluster,
        cluster_provider=provider,
        cluster_zone=zone,
        namespace=namespace,
        name=name,
        image=image,
        ports=ports,
    )

"""Parsing of ``port[:targetPort[:protocol]]`` specifications."""

from __future__ import annotations

import logging
import re

from ..core.errors import PortSpecError
from ..core.models import PORT_MAX, PortMapping

logger = logging.getLogger(__name__)

_UINT_PATTERN = re.compile(r"[0-9]+")

DEFAULT_PROTOCOL = "TCP"


def parse_port_number(value: str, entry: str) -> int:
    """Parse a base-10 unsigned 16-bit port number.

    Args:
        value: Field to parse
        entry: Whole entry the field came from, used in error messages

    Returns:
        Port number
    """
    if not _UINT_PATTERN.fullmatch(value):
        raise PortSpecError(f"Invalid port {value!r} in ports entry {entry!r}")
    number = int(value)
    if number > PORT_MAX:
        raise PortSpecError(
            f"Port {value!r} in ports entry {entry!r} is out of range (0-{PORT_MAX})"
        )
    return number


def parse_port_entry(entry: str) -> PortMapping:
    """Parse a single ``port[:targetPort[:protocol]]`` entry.

    Anything after the second colon belongs to the protocol.
    """
    fields = entry.split(":", 2)
    port = parse_port_number(fields[0], entry)

    if len(fields) == 1:
        return PortMapping(port=port, target_port=port)

    target_port = parse_port_number(fields[1], entry)
    protocol = fields[2] if len(fields) == 3 else DEFAULT_PROTOCOL
    return PortMapping(port=port, target_port=target_port, protocol=protocol)


def parse_ports(
    value: str, existing: list[PortMapping] | None = None
) -> list[PortMapping]:
    """Parse a comma-separated ports value and append it to ``existing``.

    The value is parsed completely before anything is appended, so a failing
    call leaves ``existing`` untouched.

    Args:
        value: Raw option value, e.g. ``"80,443:8443:TCP"``
        existing: Mappings accumulated from earlier occurrences of the option

    Returns:
        The accumulated list of mappings
    """
    parsed = [parse_port_entry(entry) for entry in value.split(",")]
    logger.debug(f"Parsed {len(parsed)} port mapping(s) from {value!r}")

    accumulated = existing if existing is not None else []
    accumulated.extend(parsed)
    return accumulated

from __future__ import annotations

import pytest
from pydantic import ValidationError

from k8sgen.context.ports import parse_port_entry, parse_ports
from k8sgen.core.errors import PortSpecError
from k8sgen.core.models import PortMapping


def test_single_field_targets_same_port_without_protocol() -> None:
    assert parse_ports("8080") == [PortMapping(port=8080, target_port=8080, protocol="")]


def test_two_fields_default_to_tcp() -> None:
    assert parse_ports("80:8080") == [PortMapping(port=80, target_port=8080, protocol="TCP")]


def test_three_fields_keep_protocol_verbatim() -> None:
    assert parse_ports("53:5353:udp") == [PortMapping(port=53, target_port=5353, protocol="udp")]


def test_entries_keep_input_order() -> None:
    assert parse_ports("80,443:8443:HTTPS") == [
        PortMapping(port=80, target_port=80, protocol=""),
        PortMapping(port=443, target_port=8443, protocol="HTTPS"),
    ]


def test_extra_fields_are_not_an_error() -> None:
    mapping = parse_port_entry("80:8080:TCP:extra")
    assert mapping.port == 80
    assert mapping.target_port == 8080
    assert mapping.protocol == "TCP:extra"


def test_bounds() -> None:
    assert parse_port_entry("0").port == 0
    assert parse_port_entry("65535").port == 65535
    with pytest.raises(PortSpecError, match="out of range"):
        parse_port_entry("65536")


@pytest.mark.parametrize("value", ["abc:80", "", ":80", "-1", "+80", " 80", "80\n", "8_0", "80:x", "80:"])
def test_malformed_values_fail(value: str) -> None:
    with pytest.raises(PortSpecError):
        parse_ports(value)


def test_error_names_the_entry() -> None:
    with pytest.raises(PortSpecError, match="'abc:80'"):
        parse_ports("abc:80")


def test_results_accumulate_across_calls() -> None:
    ports = parse_ports("80")
    same = parse_ports("443:8443", ports)

    assert same is ports
    assert [p.port for p in ports] == [80, 443]


def test_failed_call_appends_nothing() -> None:
    ports = parse_ports("80")
    with pytest.raises(PortSpecError):
        parse_ports("81,abc", ports)

    assert ports == [PortMapping(port=80, target_port=80)]


def test_port_mapping_is_immutable() -> None:
    mapping = parse_port_entry("80")
    with pytest.raises(ValidationError):
        mapping.port = 81  # type: ignore[misc]

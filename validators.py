from __future__ import annotations
import ipaddress
from typing import List, Tuple

from settings import MODES, ProvisioningSettings

# Static stanzas always carry netmask 255.255.255.0
STATIC_PREFIX_LEN = 24

def validate_host_address(iface: str, address: str) -> Tuple[bool, str]:
    """A static address must be a usable host in its /24."""
    try:
        ip = ipaddress.IPv4Address(address)
    except ValueError:
        return False, f"{iface} address '{address}' is not an IPv4 address."

    net = ipaddress.IPv4Network(f"{address}/{STATIC_PREFIX_LEN}", strict=False)
    if ip in (net.network_address, net.broadcast_address):
        return False, (
            f"{iface} address {address} is not a host address in its "
            f"/{STATIC_PREFIX_LEN} ({net})."
        )
    return True, ""

def validate_gateway(iface: str, gateway: str, address: str) -> Tuple[bool, str]:
    """The gateway must sit in the same /24 as the static address."""
    try:
        gw = ipaddress.IPv4Address(gateway)
    except ValueError:
        return False, f"{iface} gateway '{gateway}' is not an IPv4 address."
    try:
        net = ipaddress.IPv4Network(f"{address}/{STATIC_PREFIX_LEN}", strict=False)
    except ValueError:
        # Bad address is reported on its own
        return True, ""

    if gw not in net:
        return False, (
            f"{iface} gateway {gateway} is outside the /{STATIC_PREFIX_LEN} "
            f"of {address} ({net})."
        )
    return True, ""

def validate_mode(iface: str, mode: str) -> Tuple[bool, str]:
    if mode in MODES:
        return True, ""
    if mode == "":
        return False, (
            f"{iface} mode not set: it gets a DHCP stanza and is taken down, "
            f"but is not brought back up."
        )
    return False, (
        f"{iface} mode '{mode}' is not one of {', '.join(MODES)}: "
        f"it gets a DHCP stanza but is not brought up."
    )

def _check_iface(
    iface: str, mode: str, address: str, gateway: str
) -> List[str]:
    problems: List[str] = []
    ok, msg = validate_mode(iface, mode)
    if not ok:
        problems.append(msg)
    if mode != "static":
        return problems
    for ok, msg in (
        validate_host_address(iface, address),
        validate_gateway(iface, gateway, address),
    ):
        if not ok:
            problems.append(msg)
    return problems

def settings_warnings(settings: ProvisioningSettings) -> List[str]:
    """Problems worth reporting. None of them stop provisioning."""
    problems = _check_iface(
        "eth0", settings.eth_mode, settings.eth_address, settings.eth_gateway
    )
    problems += _check_iface(
        "wlan0", settings.wifi_mode, settings.wifi_address, settings.wifi_gateway
    )
    if settings.wifi_mode in ("static", "dhcp") and not settings.wifi_ssid:
        problems.append("wlan0 wifi_ssid is empty.")
    return problems

"""
Rewrites /etc/network/interfaces between the "#RPAC ETH" and "#RPAC WIFI"
marker lines, keeping everything the operator wrote outside of them.

Pure: takes lines, returns lines. Writing the result is done by
network.interfaces.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Tuple

from settings import ProvisioningSettings

ETH_MARKER = "#RPAC ETH"
WIFI_MARKER = "#RPAC WIFI"
NETMASK = "255.255.255.0"
DNS_SERVERS = "8.8.8.8 8.8.4.4"


class RewriteState(Enum):
    PREAMBLE = "preamble"
    ETH_BLOCK = "eth"
    POST_ETH = "posteth"
    WIFI_BLOCK = "wifi"
    POST_WIFI = "postwifi"
    DONE = "done"


@dataclass(frozen=True)
class Transition:
    emit: Tuple[str, ...]
    next_state: RewriteState


def _manages(mode: str) -> bool:
    return mode not in ("leave", "down")


def iface_stanza(
    iface: str, mode: str, address: str, gateway: str
) -> List[str]:
    lines = [f"auto {iface}"]
    if mode == "static":
        lines += [
            f"iface {iface} inet static",
            f"  address {address}",
            f"  gateway {gateway}",
            f"  netmask {NETMASK}",
            f"  dns-nameservers {DNS_SERVERS}",
        ]
    else:
        lines.append(f"iface {iface} inet dhcp")
    return lines


# -- States that consume an input line ------------------------------------

def preamble(line: str, settings: ProvisioningSettings) -> Transition:
    if line.startswith(ETH_MARKER):
        return Transition((line,), RewriteState.ETH_BLOCK)
    return Transition((line,), RewriteState.PREAMBLE)


def post_eth(line: str, settings: ProvisioningSettings) -> Transition:
    if line.startswith(WIFI_MARKER):
        return Transition((line,), RewriteState.WIFI_BLOCK)
    # The old eth0 stanza survives only if we were told to leave eth0 alone
    if settings.eth_mode == "leave":
        return Transition((line,), RewriteState.POST_ETH)
    return Transition((), RewriteState.POST_ETH)


def post_wifi(line: str, settings: ProvisioningSettings) -> Transition:
    return Transition((line,), RewriteState.POST_WIFI)


# -- Synthetic states, entered right after their marker --------------------

def eth_block(settings: ProvisioningSettings) -> Transition:
    if not _manages(settings.eth_mode):
        return Transition((), RewriteState.POST_ETH)
    lines = iface_stanza(
        "eth0", settings.eth_mode, settings.eth_address, settings.eth_gateway
    )
    return Transition(tuple(lines), RewriteState.POST_ETH)


def wifi_block(settings: ProvisioningSettings) -> Transition:
    if settings.wifi_mode == "down":
        return Transition((), RewriteState.DONE)
    if not _manages(settings.wifi_mode):
        return Transition((), RewriteState.POST_WIFI)
    lines = iface_stanza(
        "wlan0", settings.wifi_mode, settings.wifi_address, settings.wifi_gateway
    )
    lines += [
        f"  wpa-ssid {settings.wifi_ssid}",
        f"  wpa-psk {settings.wifi_psk}",
    ]
    # The new wlan0 stanza replaces everything after the marker
    return Transition(tuple(lines), RewriteState.DONE)


LINE_TRANSITIONS: Dict[RewriteState, Callable[[str, ProvisioningSettings], Transition]] = {
    RewriteState.PREAMBLE: preamble,
    RewriteState.POST_ETH: post_eth,
    RewriteState.POST_WIFI: post_wifi,
}

SYNTHETIC_TRANSITIONS: Dict[RewriteState, Callable[[ProvisioningSettings], Transition]] = {
    RewriteState.ETH_BLOCK: eth_block,
    RewriteState.WIFI_BLOCK: wifi_block,
}


def rewrite(lines: Iterable[str], settings: ProvisioningSettings) -> List[str]:
    """Return the new interfaces file as a list of lines (no newlines)."""
    out: List[str] = []
    state = RewriteState.PREAMBLE
    for line in lines:
        step = LINE_TRANSITIONS[state](line, settings)
        out.extend(step.emit)
        state = step.next_state
        while state in SYNTHETIC_TRANSITIONS:
            step = SYNTHETIC_TRANSITIONS[state](settings)
            out.extend(step.emit)
            state = step.next_state
        if state is RewriteState.DONE:
            break
    return out


def split_lines(text: str) -> List[str]:
    """Split on newlines only, dropping a trailing CR like a line reader does."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def rewrite_text(text: str, settings: ProvisioningSettings) -> str:
    lines = rewrite(split_lines(text), settings)
    return "".join(f"{line}\n" for line in lines)

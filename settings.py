from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from errors import ConfigError
from logger import log

MODES = ("static", "dhcp", "leave", "down")

# YAML key -> field name. The *_ip spellings are what operators write.
_FIELDS = {
    "eth_mode": "eth_mode",
    "eth_ip": "eth_address",
    "eth_address": "eth_address",
    "eth_gateway": "eth_gateway",
    "wifi_mode": "wifi_mode",
    "wifi_ip": "wifi_address",
    "wifi_address": "wifi_address",
    "wifi_gateway": "wifi_gateway",
    "wifi_ssid": "wifi_ssid",
    "wifi_psk": "wifi_psk",
}


@dataclass
class ProvisioningSettings:
    # Ethernet (eth0). An unset mode is neither leave nor down
    eth_mode: str = ""
    eth_address: str = ""
    eth_gateway: str = ""

    # Wi-Fi (wlan0)
    wifi_mode: str = ""
    wifi_address: str = ""
    wifi_gateway: str = ""
    wifi_ssid: str = ""
    wifi_psk: str = ""

    # Anything else in config.yml, untouched
    service_params: Dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        psk = "***" if self.wifi_psk else ""
        return (
            f"eth={self.eth_mode} {self.eth_address} gw {self.eth_gateway}; "
            f"wifi={self.wifi_mode} {self.wifi_address} gw {self.wifi_gateway} "
            f"ssid={self.wifi_ssid!r} psk={psk!r}; "
            f"service params: {sorted(self.service_params)}"
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_settings(document: str) -> ProvisioningSettings:
    """Decode config.yml text. Raises ConfigError if it is not a YAML mapping."""
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as e:
        raise ConfigError(f"config file error: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"config file error: expected a mapping, got {type(data).__name__}"
        )

    values: Dict[str, str] = {}
    extra: Dict[str, Any] = {}
    for key, value in data.items():
        name = _FIELDS.get(str(key))
        if name is None:
            extra[str(key)] = value
        else:
            values[name] = _as_text(value)
    return ProvisioningSettings(**values, service_params=extra)


def load_settings(path: Path) -> ProvisioningSettings:
    try:
        document = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"config file error: {e}") from e
    settings = parse_settings(document)
    log.info("config: %s", settings.describe())
    return settings

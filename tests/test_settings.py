import pytest
from errors import ConfigError
from settings import ProvisioningSettings, parse_settings, load_settings
from status.codes import StatusCode

DOC = """\
eth_mode: static
eth_ip: 10.4.10.170
eth_gateway: 10.4.10.1
wifi_mode: dhcp
wifi_ssid: EECS-PSK
wifi_psk: hunter2
serviceparams:
  broker: mqtt://10.4.10.2
"""

def test_parse_known_fields():
    s = parse_settings(DOC)
    assert s.eth_mode == "static"
    assert s.eth_address == "10.4.10.170"
    assert s.eth_gateway == "10.4.10.1"
    assert s.wifi_mode == "dhcp"
    assert s.wifi_ssid == "EECS-PSK"
    assert s.wifi_psk == "hunter2"

def test_unknown_keys_pass_through():
    s = parse_settings(DOC)
    assert s.service_params == {"serviceparams": {"broker": "mqtt://10.4.10.2"}}

def test_address_alias():
    s = parse_settings("wifi_mode: static\nwifi_address: 192.168.1.5\n")
    assert s.wifi_address == "192.168.1.5"

def test_missing_modes_stay_unset():
    s = parse_settings("wifi_ssid: x\n")
    assert s.eth_mode == ""
    assert s.wifi_mode == ""

def test_empty_document_is_all_defaults():
    assert parse_settings("") == ProvisioningSettings()

def test_non_string_values_become_text():
    s = parse_settings("wifi_psk: 12345678\nwifi_ssid: yes\n")
    assert s.wifi_psk == "12345678"
    assert s.wifi_ssid == "true"

def test_invalid_yaml_is_config_error():
    with pytest.raises(ConfigError) as exc:
        parse_settings("eth_mode: [unclosed\n")
    assert exc.value.status is StatusCode.NO_CONFIG

def test_non_mapping_is_config_error():
    with pytest.raises(ConfigError):
        parse_settings("- a\n- b\n")

def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc:
        load_settings(tmp_path / "config.yml")
    assert exc.value.status is StatusCode.NO_CONFIG

def test_load_from_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(DOC)
    assert load_settings(path).eth_mode == "static"

def test_describe_masks_psk():
    s = parse_settings(DOC)
    assert "hunter2" not in s.describe()
    assert "EECS-PSK" in s.describe()

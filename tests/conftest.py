from __future__ import annotations

import pytest

from scamp.config import get_settings
from scamp.config import settings as settings_module


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.delenv("SCAMP_CONFIG", raising=False)
    monkeypatch.setattr(
        settings_module,
        "default_config_path",
        lambda: tmp_path / "default-config" / "config.toml",
    )
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def hub_usb() -> dict:
    """One hub holding a mouse and a keyboard."""
    return {
        "SPUSBDataType": [
            {
                "_name": "USB31Bus",
                "_items": [
                    {
                        "_name": "Hub",
                        "vendor_id": "V1",
                        "product_id": "P1",
                        "location_id": "L1",
                        "_items": [
                            {"_name": "Mouse"},
                            {"_name": "Keyboard"},
                        ],
                    }
                ],
            }
        ]
    }


@pytest.fixture
def stub_usb() -> dict:
    """A hub_device controller stub directly under the root."""
    return {
        "SPUSBDataType": [
            {
                "_name": "USB31Bus",
                "_items": [
                    {
                        "_name": "hub_device",
                        "_items": [
                            {
                                "_name": "Webcam",
                                "vendor_id": "0x046d",
                                "product_id": "0x085c",
                                "location_id": "0x01100000",
                            }
                        ],
                    }
                ],
            }
        ]
    }


@pytest.fixture
def thunderbolt_doc() -> dict:
    return {
        "SPThunderboltDataType": [
            {"device_name": "Thunderbolt Bus", "vendor_id": "Apple Inc."},
            {
                "device_name": "TS3 Plus",
                "vendor_id": "CalDigit, Inc.",
                "device_id": "0x7",
                "port_type": "Thunderbolt 3",
            },
        ]
    }


def _display_doc(connector: str, name: str = "LG UltraFine") -> dict:
    return {
        "SPDisplaysDataType": [
            {
                "_name": "Apple M2",
                "spdisplays_ndrvs": [
                    {
                        "_name": name,
                        "_spdisplays_displayID": "2",
                        "_spdisplays_display-vendor-id": "1e6d",
                        "_spdisplays_display-product-id": "5b71",
                        "_spdisplays_resolution": "3840 x 2160",
                        "spdisplays_connection_type": connector,
                    }
                ],
            }
        ]
    }


@pytest.fixture
def make_display_doc():
    return _display_doc


@pytest.fixture
def network_doc() -> dict:
    return {
        "SPNetworkDataType": [
            {
                "_name": "USB 10/100/1000 LAN",
                "interface": "en7",
                "type": "Ethernet",
                "hardware": "Ethernet",
                "USB": "Yes",
                "IPv4": {"Addresses": ["192.168.1.40"]},
            },
            {
                "_name": "Ethernet",
                "interface": "en0",
                "type": "Ethernet",
                "hardware": "Ethernet",
                "Ethernet": {"MediaSubType": "1000baseT"},
            },
            {
                "_name": "Wi-Fi",
                "interface": "en1",
                "type": "AirPort",
                "IPv4": {"Addresses": ["192.168.1.41"]},
            },
            {
                "_name": "Thunderbolt Bridge",
                "interface": "bridge0",
                "type": "Ethernet",
                "IPv4": {"Addresses": ["169.254.1.2"]},
            },
            {
                "_name": "Ethernet Adapter (en4)",
                "interface": "en4",
                "type": "Ethernet",
                "IPv4": {"Addresses": ["10.0.0.2"]},
            },
        ]
    }

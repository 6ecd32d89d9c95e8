import pytest
from pydantic import ValidationError

from statuspanel.config import (
    DEFAULT_THERMAL_PATHS,
    InterfaceMode,
    IpDisplayMode,
    Settings,
    TemperatureUnit,
    get_settings,
)


def test_settings_defaults(monkeypatch):
    for name in (
        "PANEL_IFACE_MODE",
        "PANEL_CUSTOM_IFNAME",
        "PANEL_IP_DISPLAY",
        "PANEL_FALLBACK_TEXT",
        "PANEL_TEMPERATURE_UNIT",
        "PANEL_THERMAL_PATHS",
        "PANEL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings.interface_mode is InterfaceMode.CUSTOM
    assert settings.custom_ifname == "end0"
    assert settings.ip_display is IpDisplayMode.ADDRESS
    assert settings.temperature_unit is TemperatureUnit.CELSIUS
    assert settings.thermal_paths == DEFAULT_THERMAL_PATHS
    assert settings.meminfo_path == "/proc/meminfo"
    assert settings.loadavg_path == "/proc/loadavg"


def test_settings_from_env_parses_enums(monkeypatch):
    monkeypatch.setenv("PANEL_IFACE_MODE", "wlan0")
    monkeypatch.setenv("PANEL_IP_DISPLAY", "hostname")
    monkeypatch.setenv("PANEL_TEMPERATURE_UNIT", "fahrenheit")
    monkeypatch.setenv("PANEL_FALLBACK_TEXT", "WIKI SERVER")

    settings = Settings.from_env()
    assert settings.interface_mode is InterfaceMode.WLAN0
    assert settings.ip_display is IpDisplayMode.HOSTNAME
    assert settings.temperature_unit is TemperatureUnit.FAHRENHEIT
    assert settings.fallback_text == "WIKI SERVER"


def test_settings_from_env_parses_thermal_paths(monkeypatch):
    monkeypatch.setenv("PANEL_THERMAL_PATHS", "/tmp/a, /tmp/b,,")

    settings = Settings.from_env()
    assert settings.thermal_paths == ["/tmp/a", "/tmp/b"]


def test_invalid_mode_is_rejected(monkeypatch):
    monkeypatch.setenv("PANEL_IP_DISPLAY", "sometimes")

    with pytest.raises(ValidationError):
        Settings.from_env()


@pytest.mark.parametrize(
    "mode, expected",
    [
        (InterfaceMode.ETH0, "eth0"),
        (InterfaceMode.WLAN0, "wlan0"),
        (InterfaceMode.CUSTOM, "enp3s0"),
    ],
)
def test_target_interface(mode, expected):
    settings = Settings(interface_mode=mode, custom_ifname="enp3s0")
    assert settings.target_interface() == expected


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("PANEL_CUSTOM_IFNAME", "eth1")
    s1 = get_settings()
    s2 = get_settings()
    assert s1 is s2
    assert s1.custom_ifname == "eth1"

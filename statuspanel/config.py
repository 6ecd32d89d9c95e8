from enum import Enum
from typing import List
from pydantic import BaseModel, Field
import os
from functools import lru_cache


class InterfaceMode(str, Enum):
    ETH0 = "eth0"
    WLAN0 = "wlan0"
    CUSTOM = "custom"


class IpDisplayMode(str, Enum):
    # "hostname: ipv4", falling back to the bare hostname
    ADDRESS = "address"
    # HOSTNAME in caps, no address lookup
    HOSTNAME = "hostname"
    # fixed fallback_text
    DISABLED = "disabled"


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


DEFAULT_THERMAL_PATHS = [
    "/sys/class/thermal/thermal_zone0/temp",
    "/sys/devices/virtual/thermal/thermal_zone0/temp",
]


class Settings(BaseModel):
    # Netzwerk / IP-Anzeige
    interface_mode: InterfaceMode = Field(
        default=InterfaceMode.CUSTOM,
        description="Which interface supplies the IPv4 shown on the panel",
    )
    custom_ifname: str = Field(
        default="end0",
        description="Interface name used when interface_mode is 'custom'",
    )
    ip_display: IpDisplayMode = Field(
        default=IpDisplayMode.ADDRESS,
        description="How the identity line is rendered",
    )
    fallback_text: str = Field(
        default="UCTRONICS",
        description="Text shown when ip_display is 'disabled'",
    )

    temperature_unit: TemperatureUnit = Field(
        default=TemperatureUnit.CELSIUS,
        description="Unit of the reported SoC temperature",
    )

    # Datenquellen (überschreibbar, v.a. für Tests)
    disk_path: str = Field(
        default="/",
        description="Mount point whose filesystem is reported",
    )
    meminfo_path: str = Field(default="/proc/meminfo")
    loadavg_path: str = Field(default="/proc/loadavg")
    thermal_paths: List[str] = Field(
        default_factory=lambda: list(DEFAULT_THERMAL_PATHS),
        description="Candidate thermal-zone files, tried in order",
    )

    log_level: str = Field(default="INFO")

    def target_interface(self) -> str:
        if self.interface_mode is InterfaceMode.ETH0:
            return "eth0"
        if self.interface_mode is InterfaceMode.WLAN0:
            return "wlan0"
        return self.custom_ifname

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}

        env_map = {
            "interface_mode": "PANEL_IFACE_MODE",
            "custom_ifname": "PANEL_CUSTOM_IFNAME",
            "ip_display": "PANEL_IP_DISPLAY",
            "fallback_text": "PANEL_FALLBACK_TEXT",
            "temperature_unit": "PANEL_TEMPERATURE_UNIT",
            "log_level": "PANEL_LOG_LEVEL",
        }
        for field_name, env_name in env_map.items():
            raw = os.getenv(env_name)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()

        # Thermal-Pfade: kommasepariert, leere Einträge werden verworfen
        raw_thermal = os.getenv("PANEL_THERMAL_PATHS", "")
        thermal_paths = [p.strip() for p in raw_thermal.split(",") if p.strip()]
        if thermal_paths:
            values["thermal_paths"] = thermal_paths

        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

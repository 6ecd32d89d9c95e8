import socket
from typing import Optional, Tuple

import psutil

from statuspanel.config import IpDisplayMode, Settings, TemperatureUnit
from statuspanel.logging_setup import get_logger
from statuspanel.models.panel import DiskUsage, MemoryUsage, SdMemory

logger = get_logger(__name__)

MAX_HOSTNAME_LEN = 255
UNKNOWN_HOSTNAME = "unknown"

_GIB_SHIFT = 30
_HALF_GIB = 1 << (_GIB_SHIFT - 1)
_MIB = 1024 * 1024

# Four cores' worth of runnable work is shown as a full bar.
_LOAD_SATURATION = 4.0
_BUCKET_MAX = 255

# Raw thermal readings saturate here, far outside the 0..255 display range.
_MILLI_LIMIT = 10 ** 9


def _upcase_ascii(text: str) -> str:
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in text)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class HostStatsReader:
    """
    Read-only facade over the OS interfaces the status panel needs.

    Every method takes a fresh snapshot and never raises: unreadable or
    malformed sources degrade to the documented default (zero, the bare
    hostname, or a failed DiskUsage).
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    # ------------------------------------------------------------------ #
    # Identity
    # ------------------------------------------------------------------ #

    def hostname(self) -> str:
        """Return the system hostname, capped at MAX_HOSTNAME_LEN characters."""
        try:
            name = socket.gethostname()
        except OSError as exc:
            logger.debug("gethostname failed: %s", exc)
            name = ""
        if not name:
            name = UNKNOWN_HOSTNAME
        return name[:MAX_HOSTNAME_LEN]

    def lookup_ipv4(self, ifname: str) -> Optional[str]:
        """
        Return the first IPv4 address assigned to the interface named exactly
        ``ifname``, or None if it has none or enumeration fails.
        """
        try:
            interfaces = psutil.net_if_addrs()
        except OSError as exc:
            logger.debug("Interface enumeration failed: %s", exc)
            return None

        for addr in interfaces.get(ifname, []):
            if addr.family == socket.AF_INET and addr.address:
                return addr.address

        logger.debug("No IPv4 address found on interface %r", ifname)
        return None

    def resolve_identity(self) -> str:
        """
        Build the identity line for the panel.

        - address mode:  "<hostname>: <ipv4>", or the bare hostname if the
          configured interface has no IPv4 address
        - hostname mode: the hostname in ASCII upper case
        - disabled mode: the configured fallback text
        """
        name = self.hostname()
        mode = self.settings.ip_display

        if mode is IpDisplayMode.HOSTNAME:
            return _upcase_ascii(name)

        if mode is IpDisplayMode.DISABLED:
            return self.settings.fallback_text or name

        ip = self.lookup_ipv4(self.settings.target_interface())
        if ip is None:
            return name
        return f"{name}: {ip}"

    # ------------------------------------------------------------------ #
    # Storage / memory
    # ------------------------------------------------------------------ #

    def disk_usage(self) -> DiskUsage:
        """
        Size and usage of the root filesystem in whole GiB, rounded half up.

        "Used" is total minus the space available to unprivileged users, so
        blocks reserved for root count as used (the way ``df`` reports it).
        """
        try:
            usage = psutil.disk_usage(self.settings.disk_path)
        except OSError as exc:
            logger.warning(
                "Filesystem query for %s failed: %s", self.settings.disk_path, exc
            )
            return DiskUsage(total_gb=0, used_gb=0, failed=True)

        total = usage.total
        # psutil reports f_bavail * f_frsize as "free"
        used = max(total - usage.free, 0)

        return DiskUsage(
            total_gb=(total + _HALF_GIB) >> _GIB_SHIFT,
            used_gb=(used + _HALF_GIB) >> _GIB_SHIFT,
            failed=False,
        )

    def sd_memory(self) -> SdMemory:
        """
        Size and usage of the root filesystem in whole MiB (truncated).

        Unlike disk_usage(), "used" here is counted against all free blocks,
        so space reserved for root counts as free.
        """
        try:
            usage = psutil.disk_usage(self.settings.disk_path)
        except OSError as exc:
            logger.debug(
                "Filesystem query for %s failed: %s", self.settings.disk_path, exc
            )
            return SdMemory(total_mb=0, used_mb=0)

        return SdMemory(total_mb=usage.total // _MIB, used_mb=usage.used // _MIB)

    def _read_meminfo_kb(self) -> Tuple[Optional[int], Optional[int]]:
        total_kb: Optional[int] = None
        available_kb: Optional[int] = None

        with open(self.settings.meminfo_path, "r", encoding="utf-8") as f:
            for line in f:
                parts = line.split()
                if len(parts) < 2:
                    continue
                key = parts[0]
                if key not in ("MemTotal:", "MemAvailable:"):
                    continue
                try:
                    value = int(parts[1])
                except ValueError:
                    continue
                if value < 0:
                    continue

                if key == "MemTotal:":
                    total_kb = value
                else:
                    available_kb = value

                if total_kb is not None and available_kb is not None:
                    break

        return total_kb, available_kb

    def memory_usage(self) -> MemoryUsage:
        """MemTotal and MemAvailable in MiB; both 0.0 if either is missing."""
        try:
            total_kb, available_kb = self._read_meminfo_kb()
        except (OSError, ValueError) as exc:
            logger.debug("Reading %s failed: %s", self.settings.meminfo_path, exc)
            return MemoryUsage(total_mb=0.0, available_mb=0.0)

        if total_kb is None or available_kb is None:
            logger.debug(
                "MemTotal/MemAvailable missing in %s", self.settings.meminfo_path
            )
            return MemoryUsage(total_mb=0.0, available_mb=0.0)

        return MemoryUsage(
            total_mb=total_kb / 1024.0,
            available_mb=available_kb / 1024.0,
        )

    # ------------------------------------------------------------------ #
    # Thermal / load
    # ------------------------------------------------------------------ #

    def _read_millidegrees(self) -> int:
        for path in self.settings.thermal_paths:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    line = f.readline()
                milli = int(line.strip())
                return max(-_MILLI_LIMIT, min(_MILLI_LIMIT, milli))
            except (OSError, ValueError) as exc:
                logger.debug("Thermal source %s unusable: %s", path, exc)
        return 0

    def temperature(self) -> int:
        """SoC temperature in the configured unit, clamped to 0..255."""
        degrees = self._read_millidegrees() / 1000.0
        if self.settings.temperature_unit is TemperatureUnit.FAHRENHEIT:
            degrees = degrees * 9.0 / 5.0 + 32.0

        degrees = _clamp(degrees, 0.0, 255.0)
        return int(degrees + 0.5)

    def _read_load1(self) -> float:
        try:
            with open(self.settings.loadavg_path, "r", encoding="utf-8") as f:
                return float(f.read().split()[0])
        except (OSError, ValueError, IndexError) as exc:
            logger.debug("Reading %s failed: %s", self.settings.loadavg_path, exc)
            return 0.0

    def cpu_load_bucket(self) -> int:
        """
        1-minute load average per online core, scaled into 0..255.

        A ratio of 1.0 (one core's worth of runnable work) maps to 64, four
        cores' worth or more to 255.
        """
        load1 = self._read_load1()

        cores = psutil.cpu_count() or 1
        if cores < 1:
            cores = 1

        ratio = _clamp(load1 / cores, 0.0, _LOAD_SATURATION)
        bucket = int(ratio * (_BUCKET_MAX / _LOAD_SATURATION) + 0.5)
        return int(_clamp(bucket, 0, _BUCKET_MAX))

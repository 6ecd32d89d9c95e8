from typing import Optional

from statuspanel.config import get_settings
from statuspanel.models.panel import PanelStatus
from statuspanel.services.host_stats import HostStatsReader


def get_reader() -> HostStatsReader:
    """Build a HostStatsReader for the process-wide Settings."""
    return HostStatsReader(get_settings())


def get_panel_status(reader: Optional[HostStatsReader] = None) -> PanelStatus:
    """
    Collect one snapshot of every panel value and return it as a PanelStatus.

    Each field is an independent fresh read; a failing source only zeroes
    its own field (the disk carries an explicit failed flag instead).
    """
    if reader is None:
        reader = get_reader()

    return PanelStatus(
        identity=reader.resolve_identity(),
        disk=reader.disk_usage(),
        memory=reader.memory_usage(),
        temperature=reader.temperature(),
        temperature_unit=reader.settings.temperature_unit.value,
        cpu_load_bucket=reader.cpu_load_bucket(),
        sd=reader.sd_memory(),
    )

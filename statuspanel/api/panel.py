from typing import Dict, Union

from fastapi import APIRouter, HTTPException

from statuspanel.models.panel import DiskUsage, MemoryUsage, PanelStatus, SdMemory
from statuspanel.services import panel_monitor

router = APIRouter()


@router.get("/status", response_model=PanelStatus, summary="Panel snapshot")
async def panel_status() -> PanelStatus:
    """
    Return every value the status panel shows in one snapshot.

    This endpoint never fails: unreadable sources are reported as zero, and
    a failed filesystem query is flagged in ``disk.failed``.
    """
    return panel_monitor.get_panel_status()


@router.get("/identity", summary="Hostname / IP line")
async def panel_identity() -> Dict[str, str]:
    return {"identity": panel_monitor.get_reader().resolve_identity()}


@router.get("/disk", response_model=DiskUsage, summary="Root filesystem usage")
async def panel_disk() -> DiskUsage:
    """
    Return total and used size of the root filesystem in GiB.

    If the filesystem statistics cannot be read, a HTTP 503 Service
    Unavailable is returned.
    """
    usage = panel_monitor.get_reader().disk_usage()
    if usage.failed:
        raise HTTPException(
            status_code=503,
            detail="filesystem statistics for the root filesystem are unavailable",
        )
    return usage


@router.get("/memory", response_model=MemoryUsage, summary="RAM usage")
async def panel_memory() -> MemoryUsage:
    return panel_monitor.get_reader().memory_usage()


@router.get("/temperature", summary="SoC temperature")
async def panel_temperature() -> Dict[str, Union[int, str]]:
    reader = panel_monitor.get_reader()
    return {
        "temperature": reader.temperature(),
        "unit": reader.settings.temperature_unit.value,
    }


@router.get("/cpu", summary="CPU load bucket")
async def panel_cpu() -> Dict[str, int]:
    """Return the 1-minute load per core scaled into 0..255."""
    return {"cpu_load_bucket": panel_monitor.get_reader().cpu_load_bucket()}


@router.get("/sd", response_model=SdMemory, summary="Root filesystem usage in MiB")
async def panel_sd() -> SdMemory:
    return panel_monitor.get_reader().sd_memory()

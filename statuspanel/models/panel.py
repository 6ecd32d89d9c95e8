from pydantic import BaseModel, Field


class DiskUsage(BaseModel):
    """Root filesystem size and usage in whole GiB."""

    total_gb: int = Field(..., ge=0, description="Filesystem size in GiB (rounded)")
    used_gb: int = Field(
        ...,
        ge=0,
        description="Used space in GiB, including blocks reserved for root",
    )
    failed: bool = Field(
        False,
        description="True if the filesystem query failed; both sizes are 0 then.",
    )


class MemoryUsage(BaseModel):
    """RAM figures from the kernel, in MiB."""

    total_mb: float = Field(..., ge=0.0, description="MemTotal in MiB")
    available_mb: float = Field(..., ge=0.0, description="MemAvailable in MiB")


class SdMemory(BaseModel):
    """Root filesystem size and usage in whole MiB (truncated)."""

    total_mb: int = Field(..., ge=0)
    used_mb: int = Field(
        ...,
        ge=0,
        description="Used space in MiB, counted against all free blocks",
    )


class PanelStatus(BaseModel):
    """One snapshot of everything the status panel shows."""

    identity: str = Field(..., description="Hostname line, e.g. 'pi-rack: 192.168.1.50'")
    disk: DiskUsage
    memory: MemoryUsage
    temperature: int = Field(
        ...,
        ge=0,
        le=255,
        description="SoC temperature in the configured unit",
    )
    temperature_unit: str = Field(..., description="'celsius' or 'fahrenheit'")
    cpu_load_bucket: int = Field(
        ...,
        ge=0,
        le=255,
        description="1-minute load per core scaled so 4 cores' worth is 255",
    )
    sd: SdMemory

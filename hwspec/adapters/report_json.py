"""
The JSON document consumed downstream. Field names and nesting are part of
the contract with consumers and must not change.
"""
from typing import Annotated

from pydantic import BaseModel, Field

from hwspec.internal.constants import UINT32_MAX
from hwspec.kernel.contracts import ResourceReport

U64 = Annotated[int, Field(ge=0)]


class RamDocument(BaseModel):
    size: U64
    type: str


class SsdDocument(BaseModel):
    size: U64
    type: str


class GpuDocument(BaseModel):
    model: str


class CpuSpecsDocument(BaseModel):
    cores: int = Field(ge=0, le=UINT32_MAX)
    clock_rate: U64


class CpuDocument(BaseModel):
    specs: CpuSpecsDocument


class ResourceDocument(BaseModel):
    ram: RamDocument
    ssd: SsdDocument
    gpus: list[GpuDocument] = Field(min_length=1)
    cpu: CpuDocument


class ConfigDocument(BaseModel):
    resource: ResourceDocument


class ResourceConfigDocument(BaseModel):
    name: str
    description: str
    network: str
    type: str
    config: ConfigDocument

    @classmethod
    def from_report(cls, report: ResourceReport) -> "ResourceConfigDocument":
        resource = report.resource
        return cls(
            name=report.name,
            description=report.description,
            network=report.network,
            type=report.kind,
            config=ConfigDocument(
                resource=ResourceDocument(
                    ram=RamDocument(size=resource.ram.size_bytes, type=resource.ram.technology),
                    ssd=SsdDocument(size=resource.storage.size_bytes, type=resource.storage.technology),
                    gpus=[GpuDocument(model=gpu.model) for gpu in resource.gpus],
                    cpu=CpuDocument(
                        specs=CpuSpecsDocument(
                            cores=resource.cpu.core_count,
                            clock_rate=resource.cpu.clock_hz,
                        )
                    ),
                )
            ),
        )


def render_report(report: ResourceReport) -> str:
    """Pretty-printed JSON (2-space indent) for a report."""
    return ResourceConfigDocument.from_report(report).model_dump_json(indent=2)

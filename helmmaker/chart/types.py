"""In-memory representation of a chart directory."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChartMetadata(BaseModel):
    """Contents of Chart.yaml."""

    model_config = ConfigDict(populate_by_name=True, extra='allow')

    api_version: str = Field("v2", alias="apiVersion")
    name: str
    version: str
    description: Optional[str] = None
    type: Optional[str] = "application"
    app_version: Optional[str] = Field(None, alias="appVersion")
    deprecated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return Chart.yaml fields using their on-disk key names."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        if not self.deprecated:
            data.pop("deprecated", None)
        return data


@dataclass
class ChartFile:
    """A file belonging to a chart, named relative to the chart root."""

    name: str
    data: bytes


@dataclass
class Chart:
    """A loaded chart.

    Attributes:
        metadata: Parsed Chart.yaml
        templates: Files under ``templates/``
        values: Parsed values.yaml
        raw: Every file as read from disk, including Chart.yaml and values.yaml
        files: Files that are neither metadata, values nor templates
    """

    metadata: ChartMetadata
    templates: List[ChartFile] = field(default_factory=list)
    values: Dict[str, Any] = field(default_factory=dict)
    raw: List[ChartFile] = field(default_factory=list)
    files: List[ChartFile] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.metadata.name

    def raw_file(self, name: str) -> Optional[ChartFile]:
        """Return the raw entry called ``name``, if any."""
        for chart_file in self.raw:
            if chart_file.name == name:
                return chart_file
        return None

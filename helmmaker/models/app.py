"""Application models describing the charts to scaffold."""
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator


class Application(BaseModel):
    """One deployable unit inside a chart.

    Names are not validated here: the scaffolding engine checks each name
    right before it touches the filesystem for that application.
    """

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
        populate_by_name=True,
    )

    name: str = Field(..., description="Application name, used in file names and value keys")
    resource_types: List[str] = Field(
        default_factory=list,
        alias="types",
        description="Resource types to generate (deployment, svc, service, ...)",
    )
    values: Dict[str, JsonValue] = Field(
        default_factory=dict,
        description="Configuration values written under the app's key in values.yaml",
    )

    @field_validator('resource_types')
    @classmethod
    def dedupe_resource_types(cls, v):
        """Keep the first occurrence of each tag, preserving order."""
        seen = set()
        ordered = []
        for tag in v:
            if tag not in seen:
                seen.add(tag)
                ordered.append(tag)
        return ordered


class ApplicationSet(BaseModel):
    """A chart combining several applications."""

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "demo",
                "path": ".",
                "version": "1.0.0",
                "apps": [
                    {"name": "app1", "types": ["deployment", "svc"], "values": {"replicaCount": 1}},
                    {"name": "app2", "types": ["deployment"]},
                ],
            }
        },
    )

    name: str = Field(..., description="Chart name (becomes the chart directory)")
    output_path: Path = Field(Path("."), alias="path", description="Directory the chart is created in")
    applications: List[Application] = Field(default_factory=list, alias="apps")
    version: Optional[str] = Field(None, description="Chart version written into Chart.yaml")

    def values_document(self) -> Dict[str, Dict[str, JsonValue]]:
        """Return the combined values mapping keyed by application name.

        Later applications win when two share a name.
        """
        document: Dict[str, Dict[str, JsonValue]] = {}
        for app in self.applications:
            document[app.name] = app.values
        return document

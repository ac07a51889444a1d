"""Resource-type template registry.

Maps a resource-type tag (``deployment``, ``svc``, ...) to the template the
scaffolding engine emits for it. Registries are read-only once built.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

from helmmaker.templates.defaults import APP_DEPLOYMENT, APP_SERVICE


@dataclass(frozen=True)
class TemplateDescriptor:
    """Template for one resource type.

    Attributes:
        resource_type: Tag selecting this template
        filename_pattern: Output file name with a ``{name}`` slot for the app
        content: Raw template body with placeholder markers
    """

    resource_type: str
    filename_pattern: str = ""
    content: str = ""

    @property
    def is_empty(self) -> bool:
        """Reserved resource kinds carry no body and are never emitted."""
        return not self.content

    def filename_for(self, app_name: str) -> str:
        """Return the output file name for ``app_name``."""
        return self.filename_pattern.format(name=app_name)


class TemplateRegistry:
    """Immutable lookup table of template descriptors."""

    def __init__(self, descriptors: Mapping[str, TemplateDescriptor]):
        self._descriptors = MappingProxyType(dict(descriptors))

    def lookup(self, resource_type: str) -> Optional[TemplateDescriptor]:
        """Return the descriptor for ``resource_type``.

        Unknown tags and reserved tags without a body both resolve to None;
        callers treat that as "nothing to emit".
        """
        descriptor = self._descriptors.get(resource_type)
        if descriptor is None or descriptor.is_empty:
            return None
        return descriptor

    def resource_types(self) -> List[str]:
        """List tags that produce a file, in registration order."""
        return [tag for tag, d in self._descriptors.items() if not d.is_empty]

    def reserved_types(self) -> List[str]:
        """List tags registered without a template body."""
        return [tag for tag, d in self._descriptors.items() if d.is_empty]

    def __contains__(self, resource_type: str) -> bool:
        return resource_type in self._descriptors

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


DEFAULT_REGISTRY = TemplateRegistry({
    "deployment": TemplateDescriptor(
        resource_type="deployment",
        filename_pattern="deployment_{name}.yaml",
        content=APP_DEPLOYMENT,
    ),
    "svc": TemplateDescriptor(
        resource_type="svc",
        filename_pattern="svc_{name}.yaml",
        content=APP_SERVICE,
    ),
    "service": TemplateDescriptor(
        resource_type="service",
        filename_pattern="service_{name}.yaml",
        content=APP_SERVICE,
    ),
    # Reserved for future resource kinds
    "pv": TemplateDescriptor(resource_type="pv"),
    "pvc": TemplateDescriptor(resource_type="pvc"),
    "set": TemplateDescriptor(resource_type="set"),
})

"""Interface models: what a module exposes to the rest of the project."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class InterfaceMember:
    name: str
    kind: str  # export | function | method | class
    visibility: str = "public"
    parameters: tuple[str, ...] = ()
    properties: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "type": self.kind, "visibility": self.visibility}
        if self.parameters:
            data["parameters"] = list(self.parameters)
        if self.properties:
            data["properties"] = list(self.properties)
        return data


@dataclass
class ModuleInterface:
    """Public API, types and constants of one module."""

    module_id: str
    module_name: str
    public_api: list[InterfaceMember] = field(default_factory=list)
    types: list[InterfaceMember] = field(default_factory=list)
    constants: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.public_api or self.types or self.constants)

    def to_dict(self) -> dict[str, Any]:
        return {
            "moduleId": self.module_id,
            "moduleName": self.module_name,
            "publicAPI": [m.to_dict() for m in self.public_api],
            "types": [t.to_dict() for t in self.types],
            "constants": list(self.constants),
        }

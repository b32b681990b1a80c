"""Declarative attribute schemas for the provider, its data sources and resources.

A :class:`Schema` plays two roles. It checks the configuration a caller
supplies (required inputs present, no unknown or read-only inputs), and it
projects decoded records into the declared output shape so only declared
attributes, and within objects only declared keys, reach the caller.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from .utils.http_client import ConfigurationError

STRING_KIND = "string"
INT64_KIND = "int64"
LIST_KIND = "list"
OBJECT_KIND = "object"


class AttrType(BaseModel):
    kind: str
    element: Optional["AttrType"] = None
    attributes: Optional[Dict[str, "AttrType"]] = None


AttrType.model_rebuild()

STRING = AttrType(kind=STRING_KIND)
INT64 = AttrType(kind=INT64_KIND)


def list_of(element: AttrType) -> AttrType:
    return AttrType(kind=LIST_KIND, element=element)


def object_of(attributes: Dict[str, AttrType]) -> AttrType:
    return AttrType(kind=OBJECT_KIND, attributes=attributes)


class Attribute(BaseModel):
    type: AttrType
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    description: Optional[str] = None

    @property
    def configurable(self) -> bool:
        return self.required or self.optional


class Schema(BaseModel):
    attributes: Dict[str, Attribute] = Field(default_factory=dict)
    description: Optional[str] = None

    def validate_config(self, config: Mapping[str, Any]) -> None:
        """Raises :class:`ConfigurationError` for unknown, read-only or missing inputs."""

        for name, value in config.items():
            attribute = self.attributes.get(name)
            if attribute is None:
                raise ConfigurationError(f"unsupported argument {name!r}")
            if value is not None and not attribute.configurable:
                raise ConfigurationError(f"{name!r} is computed and can not be configured")

        for name, attribute in self.attributes.items():
            if attribute.required and config.get(name) in (None, ""):
                raise ConfigurationError(f"the argument {name!r} is required, but no definition was found")

    def project(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return {name: _project_value(attribute.type, values.get(name)) for name, attribute in self.attributes.items()}


def _project_value(attr_type: AttrType, value: Any) -> Any:
    if value is None:
        return None
    if attr_type.kind == LIST_KIND:
        return [_project_value(attr_type.element, item) for item in value]
    if attr_type.kind == OBJECT_KIND:
        return {key: _project_value(nested, value.get(key)) for key, nested in (attr_type.attributes or {}).items()}
    if attr_type.kind == INT64_KIND:
        return int(value)
    return value


def string_attribute(**kwargs: Any) -> Attribute:
    return Attribute(type=STRING, **kwargs)


def list_attribute(element: AttrType, **kwargs: Any) -> Attribute:
    return Attribute(type=list_of(element), **kwargs)


def object_attribute(attributes: Dict[str, AttrType], **kwargs: Any) -> Attribute:
    return Attribute(type=object_of(attributes), **kwargs)

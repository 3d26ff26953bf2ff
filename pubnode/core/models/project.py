"""
Project list model — the projects a node serves, with their secrets.

Loaded from the ``projects`` key of the node config file. Each project
may declare namespaces that group channels with shared options.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from pubnode.core.errors import ValidationError

NAME_PATTERN = re.compile(r"^[-a-zA-Z0-9_]{2,}$")


class ChannelOptions(BaseModel):
    """Per-channel behaviour shared by projects and namespaces."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    publish: bool = False
    anonymous: bool = False
    presence: bool = False
    join_leave: bool = False
    history_size: int = Field(default=0, ge=0)
    history_lifetime: int = Field(default=0, ge=0)


class Namespace(ChannelOptions):
    """A named group of channels inside a project."""

    name: str


class Project(ChannelOptions):
    """One project: a name, the secret used to sign tokens, and namespaces."""

    name: str
    secret: str = ""
    connection_lifetime: int = Field(default=0, ge=0)
    namespaces: list[Namespace] = Field(default_factory=list)

    def get_namespace(self, name: str) -> Namespace | None:
        """Look up a namespace by name."""
        for ns in self.namespaces:
            if ns.name == name:
                return ns
        return None


_PROJECT_LIST = TypeAdapter(list[Project])


@dataclass
class Structure:
    """The full project list of a node."""

    projects: list[Project] = field(default_factory=list)

    @classmethod
    def from_settings(cls, projects: Any) -> Structure:
        """Build from the raw ``projects`` value of a config file.

        Raises:
            ValidationError: If the value does not have the shape of a project list.
        """
        if projects is None:
            projects = []
        try:
            return cls(projects=_PROJECT_LIST.validate_python(projects))
        except PydanticValidationError as e:
            raise ValidationError(f"Malformed project list: {e}") from e

    def validate(self) -> None:
        """Check names, uniqueness, and secrets.

        Raises:
            ValidationError: On the first problem found.
        """
        if not self.projects:
            raise ValidationError("no projects found in configuration")

        seen: set[str] = set()
        for project in self.projects:
            if not NAME_PATTERN.match(project.name):
                raise ValidationError(
                    f"wrong project name '{project.name}': must match {NAME_PATTERN.pattern}"
                )
            if project.name in seen:
                raise ValidationError(f"project name must be unique: '{project.name}' found twice")
            seen.add(project.name)

            if not project.secret:
                raise ValidationError(f"project '{project.name}' has no secret")

            ns_seen: set[str] = set()
            for ns in project.namespaces:
                if not NAME_PATTERN.match(ns.name):
                    raise ValidationError(
                        f"wrong namespace name '{ns.name}' in project '{project.name}': "
                        f"must match {NAME_PATTERN.pattern}"
                    )
                if ns.name in ns_seen:
                    raise ValidationError(
                        f"namespace name must be unique within project '{project.name}': "
                        f"'{ns.name}' found twice"
                    )
                ns_seen.add(ns.name)

    def project_by_name(self, name: str) -> Project | None:
        """Look up a project by name."""
        for project in self.projects:
            if project.name == name:
                return project
        return None

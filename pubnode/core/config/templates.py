"""
Starter config templates — one fixed layout per file format.

Each template holds exactly one project entry. ``{name}`` and
``{secret}`` are substituted literally, without escaping.
"""

from __future__ import annotations

from dataclasses import dataclass

from pubnode.core.errors import PreconditionError

JSON_TEMPLATE = """\
{{
  "projects": [
    {{
      "name": "{name}",
      "secret": "{secret}"
    }}
  ]
}}
"""

TOML_TEMPLATE = """\
[[projects]]
    name = "{name}"
    secret = "{secret}"
"""

YAML_TEMPLATE = """\
projects:
  - name: {name}
    secret: {secret}
"""

_TEMPLATES: dict[str, str] = {
    "json": JSON_TEMPLATE,
    "toml": TOML_TEMPLATE,
    "yaml": YAML_TEMPLATE,
    "yml": YAML_TEMPLATE,
}


@dataclass(frozen=True)
class ProjectEntry:
    """Values filled into a starter template."""

    name: str
    secret: str


def template_for(ext: str) -> str:
    """Return the template for a file extension (``yaml`` and ``yml`` share one).

    Raises:
        PreconditionError: If the extension is not supported.
    """
    try:
        return _TEMPLATES[ext]
    except KeyError:
        raise PreconditionError(
            "output config file must have one of supported extensions: "
            + ", ".join(_TEMPLATES)
        ) from None


def render(ext: str, entry: ProjectEntry) -> str:
    """Render the starter config for *ext* with one project entry."""
    return template_for(ext).format(name=entry.name, secret=entry.secret)

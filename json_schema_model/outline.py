"""
Human-readable outline of a schema tree.

Renders one line per node, indented by depth. Meant for debugging and
inspection; it is not a JSON encoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import jinja2

from .schema_model.nodes import Model, ObjectSchema, RefSchema, Schema
from .schema_model.queries import get_name, iter_sub_schemas, schema_kind

CURRENT_DIR = Path(__file__).parent

INDENT = "  "


@dataclass
class OutlineRow:
    indent: str
    label: str
    summary: str


class OutlineRenderer:
    """Renders models and schemas through the outline template."""

    def __init__(self):
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
        self.template = self.jinja_env.from_string((CURRENT_DIR / "templates" / "outline.txt.jinja2").read_text())

    def render(self, target: Model | Schema) -> str:
        rows: list[OutlineRow] = []
        if isinstance(target, Model):
            self._collect(target.root, "root", 0, rows)
            for name, definition in target.definitions.items():
                self._collect(definition, f"definitions/{_escape(name)}", 0, rows)
        else:
            self._collect(target, "root", 0, rows)
        return self.template.render(rows=rows)

    def _collect(self, schema: Schema, label: str, depth: int, rows: list[OutlineRow]) -> None:
        stack = [(schema, label, depth)]
        while stack:
            node, label, depth = stack.pop()
            rows.append(OutlineRow(indent=INDENT * depth, label=label, summary=self._summary(node)))

            if isinstance(node, ObjectSchema):
                # Property labels carry the required marker instead of the pointer segment
                children = [
                    (prop.schema, _escape(prop.name) + (" (required)" if prop.is_required else ""), depth + 1)
                    for prop in node.properties
                ]
            else:
                children = [(child, segment, depth + 1) for segment, child in iter_sub_schemas(node)]
            stack.extend(reversed(children))

    @staticmethod
    def _summary(schema: Schema) -> str:
        summary = schema_kind(schema).value
        name = get_name(schema)
        if name is not None:
            summary += f' "{_escape(name, _QUOTED_ESCAPES)}"'
        if isinstance(schema, RefSchema):
            summary += f" -> {_escape(schema.ref)}"
        return summary


# Keeps every node on a single line
_LINE_ESCAPES = str.maketrans({"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"})
_QUOTED_ESCAPES = str.maketrans({"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", '"': '\\"'})


def _escape(text: str, table: dict[int, str] = _LINE_ESCAPES) -> str:
    return text.translate(table)


def render_outline(target: Model | Schema) -> str:
    """Render a model or a single schema as an indented outline."""
    return OutlineRenderer().render(target)

"""
JSON Schema for catalog data documents.

A document is either a bare list of tool objects or an object with a
``tools`` list.
"""

# Sort keys go through locale.strxfrm, which rejects NUL characters
NO_NUL = r"^[^\x00]*$"

TOOL_SCHEMA = {
    "type": "object",
    "required": ["id", "name", "category", "url"],
    "properties": {
        "id": {"type": "integer", "minimum": 1},
        "name": {"type": "string", "pattern": NO_NUL},
        "description": {"type": "string"},
        "category": {"type": "string", "minLength": 1, "pattern": NO_NUL},
        "tags": {"type": "array", "items": {"type": "string"}},
        "icon": {"type": "string"},
        "url": {"type": "string"},
        "is_local": {"type": "boolean"},
        "is_original": {"type": "boolean"},
        "is_migrated": {"type": "boolean"},
        "priority": {"type": "integer", "minimum": 1, "maximum": 10},
        "complexity": {"type": "integer", "minimum": 1, "maximum": 10},
        "popular": {"type": "boolean"}
    }
}

CATALOG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Tool catalog",
    "definitions": {
        "tool": TOOL_SCHEMA,
        "tools": {"type": "array", "items": {"$ref": "#/definitions/tool"}}
    },
    "oneOf": [
        {"$ref": "#/definitions/tools"},
        {
            "type": "object",
            "required": ["tools"],
            "properties": {"tools": {"$ref": "#/definitions/tools"}}
        }
    ]
}

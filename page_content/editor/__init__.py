"""Surface d'édition interactive d'un bloc."""
from .surface import BlockEditorSurface, EditorState, EditableFields, EDITABLE_FIELDS, parse_percent

__all__ = ["BlockEditorSurface", "EditorState", "EditableFields", "EDITABLE_FIELDS", "parse_percent"]

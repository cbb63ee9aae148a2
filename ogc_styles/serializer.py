# ============================================================================
# OGC STYLES SERIALIZER
# ============================================================================
# STATUS: Core - output encoding
# PURPOSE: Render logical resources (Styles, StyleMetadata) into Documents per format
# EXPORTS: render, RENDERERS
# DEPENDENCIES: pydantic, ogc_styles.formats, ogc_styles.models, exceptions
# ============================================================================
"""
Resource Serializer.

Only JSON is implemented. JSON output is compact, keeps non-ASCII characters
unescaped and ends with a newline:

    render(styles, "styles", JSON_FORMAT)
        -> Document(path="styles.json", media_type="application/json", ...)
"""

import json
from typing import Callable, Dict

from pydantic import BaseModel

from exceptions import RenderError

from .formats import JSON_FORMAT
from .models import Document, Format


def _render_json(obj: BaseModel, path: str) -> Document:
    data = obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    content = json.dumps(data, ensure_ascii=False, separators=(",", ":")) + "\n"
    return Document(
        path=f"{path}.{JSON_FORMAT.extension}",
        media_type=JSON_FORMAT.media_type,
        content=content.encode("utf-8")
    )


RENDERERS: Dict[str, Callable[[BaseModel, str], Document]] = {
    JSON_FORMAT.name: _render_json,
}


def render(obj: BaseModel, path: str, fmt: Format) -> Document:
    """
    Serialize ``obj`` to ``<path>.<extension>``.

    Raises:
        RenderError: no renderer for the format
    """
    renderer = RENDERERS.get(fmt.name)
    if renderer is None:
        raise RenderError(f"format: {fmt.name} not implemented")
    try:
        return renderer(obj, path)
    except (TypeError, ValueError) as e:
        raise RenderError(f"could not render {path} as {fmt.name}: {e}") from e

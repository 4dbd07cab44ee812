"""Render an index of file sections as JSON document elements."""

import json
from typing import Any, Dict, Iterable, List, Optional, Union

from .models import CodeBlock, FileSectionRecord

CODE_BLOCK_SHAPES = ("string", "object")


def to_document_elements(
    index: Iterable[FileSectionRecord], code_block_shape: str = "string"
) -> List[Dict[str, Any]]:
    """
    Convert records to the JSON wire shape.

    Args:
        index: Records in index order
        code_block_shape: "string" for bare code values, "object" to keep
            language and meta alongside the value

    Returns:
        One dict per record with file_path, header, text_blocks, code_blocks
    """
    if code_block_shape not in CODE_BLOCK_SHAPES:
        raise ValueError(f"Unknown code block shape: {code_block_shape}")

    return [
        {
            "file_path": record.file_path,
            "header": record.title,
            "text_blocks": list(record.body_text),
            "code_blocks": [_format_code_block(block, code_block_shape) for block in record.code_blocks],
        }
        for record in index
    ]


def render_json(
    index: Iterable[FileSectionRecord],
    code_block_shape: str = "string",
    indent: Optional[int] = 2,
) -> str:
    """Serialize the index as a single JSON array."""
    return json.dumps(to_document_elements(index, code_block_shape), indent=indent, ensure_ascii=False)


def _format_code_block(block: CodeBlock, code_block_shape: str) -> Union[str, Dict[str, Any]]:
    if code_block_shape == "string":
        return block.value
    return {"language": block.language, "meta": block.meta, "value": block.value}

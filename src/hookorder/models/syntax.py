"""
Boundary model for incoming syntax trees.

Only the root is validated: it must be a JSON object with a string
``type``. Everything below the root is read defensively by the shape
builder and discovery, never validated.
"""

from __future__ import annotations

from pydantic import BaseModel


class _SyntaxNode(BaseModel):
    type: str

    model_config = {
        "extra": "allow",
    }

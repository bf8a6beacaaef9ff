"""
Name: Reader Notes (Text or Text + Images)

Responsibilities:
  - Model the reader's notes as a sum type: TextOnly | TextWithImages
  - Lift either form into one canonical shape via normalize_notes()
  - Decode image attachments carried as base64 data URLs

Collaborators:
  - routes.py: builds these from the request payload (str or {text, images})
  - application.use_cases: normalize once, then branch on has_images
  - infrastructure.services.google_llm_service: sends decoded image bytes

Constraints:
  - No framework dependencies (plain dataclasses)
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Union

_DATA_URL_RE = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]+)*),(?P<payload>.*)$",
    re.DOTALL,
)

DEFAULT_IMAGE_MIME = "image/png"


@dataclass(frozen=True)
class ImageAttachment:
    """An image attached to notes, as sent by the browser."""

    id: str
    data: str
    name: str | None = None
    size: int | None = None

    def decode(self) -> tuple[str, bytes]:
        """
        R: Split the data URL into (mime_type, raw bytes).

        Raises:
            ValueError: if `data` is not a base64 data URL
        """
        return parse_data_url(self.data)


def parse_data_url(data_url: str) -> tuple[str, bytes]:
    match = _DATA_URL_RE.match(data_url or "")
    if not match:
        raise ValueError("image data must be a data URL (data:<mime>;base64,<payload>)")

    params = match.group("params") or ""
    if ";base64" not in params:
        raise ValueError("image data URL must be base64-encoded")

    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("image data URL has an invalid base64 payload") from exc

    return match.group("mime") or DEFAULT_IMAGE_MIME, payload


@dataclass(frozen=True)
class TextOnly:
    text: str


@dataclass(frozen=True)
class TextWithImages:
    text: str
    images: list[ImageAttachment] = field(default_factory=list)

    @property
    def has_images(self) -> bool:
        return bool(self.images)


UserNotes = Union[TextOnly, TextWithImages]


def normalize_notes(notes: UserNotes) -> TextWithImages:
    """R: Canonical shape for every consumer: text plus a (possibly empty) image list."""
    if isinstance(notes, TextWithImages):
        return notes
    return TextWithImages(text=notes.text, images=[])

"""
Name: Prompt Fragment Loader (Markdown with Frontmatter)

Responsibilities:
  - Load static prompt fragments from packaged markdown files
  - Parse YAML-like frontmatter for metadata
  - Cache loaded fragments in-memory per instance
  - Reject names that could escape the prompts directory

Collaborators:
  - studio/prompts/{capability}/{name}.md (packaged fragments)
  - application.tutor_prompts (tutor role + grading rubric)
  - logger (observability)

Patterns:
  - Repository-like (filesystem-backed templates)
  - Frontmatter parsing for metadata
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from ...exceptions import PromptTemplateError
from ...logger import logger

PROMPTS_DIR = (Path(__file__).resolve().parents[2] / "prompts").resolve()

_NAME_RE = re.compile(r"^[a-z0-9_]+$")
_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)


@dataclass
class PromptMetadata:
    """R: Parsed frontmatter metadata from a prompt file."""

    type: str = ""
    version: str = ""
    lang: str = ""
    description: str = ""
    updated: str = ""


def parse_frontmatter(content: str) -> tuple[PromptMetadata, str]:
    """
    R: Parse `key: value` frontmatter from markdown content.

    Returns:
        Tuple of (metadata, body_without_frontmatter)
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return PromptMetadata(), content

    metadata = PromptMetadata()
    for line in match.group(1).split("\n"):
        line = line.strip()
        if not line or line.startswith("#") or ":" not in line:
            continue
        key, _, value = line.partition(":")
        key = key.strip()
        if hasattr(metadata, key):
            setattr(metadata, key, value.strip().strip('"').strip("'"))

    return metadata, content[match.end() :]


class PromptLibrary:
    """
    R: Load and cache prompt fragments by (capability, name).

    CRC:
      Responsibilities:
        - Resolve safe fragment paths
        - Strip frontmatter, cache the body
      Collaborators:
        - filesystem (Path.read_text)
      Constraints:
        - capability and name are [a-z0-9_]+ only
    """

    def __init__(self, *, prompts_dir: Path = PROMPTS_DIR):
        self._prompts_dir = prompts_dir
        self._cache: dict[tuple[str, str], str] = {}
        self._metadata: dict[tuple[str, str], PromptMetadata] = {}

    def fragment(self, capability: str, name: str) -> str:
        """R: Return the fragment body (frontmatter removed, outer whitespace stripped)."""
        key = (self._validate_name(capability), self._validate_name(name))
        if key not in self._cache:
            self._cache[key] = self._load(*key)
        return self._cache[key]

    def metadata(self, capability: str, name: str) -> PromptMetadata | None:
        return self._metadata.get((capability, name))

    @staticmethod
    def _validate_name(value: str) -> str:
        v = (value or "").strip()
        if not _NAME_RE.match(v):
            raise PromptTemplateError(f"Invalid prompt fragment name '{value}'")
        return v

    def _load(self, capability: str, name: str) -> str:
        path = self._prompts_dir / capability / f"{name}.md"
        if not path.exists():
            logger.error("Prompt fragment not found", extra={"path": str(path)})
            raise PromptTemplateError(f"Prompt fragment not found: {capability}/{name}")

        meta, body = parse_frontmatter(path.read_text(encoding="utf-8"))
        self._metadata[(capability, name)] = meta

        logger.info(
            "Loaded prompt fragment",
            extra={
                "capability": capability,
                "fragment": name,
                "version": meta.version,
                "chars": len(body),
            },
        )
        return body.strip()


@lru_cache
def get_prompt_library() -> PromptLibrary:
    """R: Singleton PromptLibrary rooted at the packaged prompts directory."""
    return PromptLibrary()

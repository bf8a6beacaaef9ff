"""
Prompt Infrastructure

Public API for loading packaged prompt fragments.
"""

from .loader import PromptLibrary, PromptMetadata, get_prompt_library, parse_frontmatter

__all__ = ["PromptLibrary", "PromptMetadata", "get_prompt_library", "parse_frontmatter"]

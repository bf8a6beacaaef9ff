"""
Infrastructure Services

Text-generation adapters and the shared retry policy.
"""

from .fake_llm_service import FakeLLMService
from .google_llm_service import GoogleLLMService
from .retry import create_retry_decorator, is_transient_error

__all__ = [
    "FakeLLMService",
    "GoogleLLMService",
    "create_retry_decorator",
    "is_transient_error",
]

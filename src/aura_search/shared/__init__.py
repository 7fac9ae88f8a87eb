"""
Shared utilities for Aura Search.

Provides:
- Unified exception hierarchy
- Async utilities (TaskGroup fan-out, circuit breaker)
"""

from .async_utils import CircuitBreaker, gather_with_errors
from .exceptions import (
    APIError,
    AuraSearchError,
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidQueryError,
    PipelineError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    # Exceptions
    "AuraSearchError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "APIError",
    "RateLimitError",
    "ValidationError",
    "InvalidQueryError",
    "ConfigurationError",
    "PipelineError",
    # Async utilities
    "gather_with_errors",
    "CircuitBreaker",
]

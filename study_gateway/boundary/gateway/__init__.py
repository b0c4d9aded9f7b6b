"""
Hosted gateway adapters.

Exports:
  - HostedFunctionClient: httpx transport to the hosted functions
  - CompletionClient: completion, transcription and link calls returning CompletionResult
  - classify_response, classify_exception: raw error shape -> CompletionResult
"""

from study_gateway.boundary.gateway.completion_client import CompletionClient
from study_gateway.boundary.gateway.error_classifier import classify_exception, classify_response
from study_gateway.boundary.gateway.functions_client import HostedFunctionClient

__all__ = [
    "CompletionClient",
    "HostedFunctionClient",
    "classify_exception",
    "classify_response",
]

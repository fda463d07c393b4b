"""
Ollama integration module for the FAQ Router Bot
Used by the agent orchestrator to classify request types
"""

from .ollama_client import OllamaClient

__all__ = [
    'OllamaClient'
]

"""Retrieval-augmented chat pipeline."""

from regchat.core.chat.generator import GroundedCompletionGenerator
from regchat.core.chat.orchestrator import ChatOrchestrator

__all__ = ["ChatOrchestrator", "GroundedCompletionGenerator"]

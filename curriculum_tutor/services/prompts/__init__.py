"""
Prompt Engine

Turns a pedagogical mode plus retrieved context into LLM instructions.
"""

from curriculum_tutor.services.prompts.builder import PromptPair, build_prompt

__all__ = ["PromptPair", "build_prompt"]

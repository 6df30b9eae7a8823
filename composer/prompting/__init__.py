"""
Prompt Builder layer for the email composer.

Exports the system instruction contract and build_prompt() assembler.
"""

from .prompt_builder import SYSTEM_PROMPT, build_system_instruction, build_prompt

__all__ = ["SYSTEM_PROMPT", "build_system_instruction", "build_prompt"]

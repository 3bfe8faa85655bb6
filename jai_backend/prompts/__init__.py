"""
Centralized prompt data for the assistant.

- shortcuts.py → phrase sets and canned replies for locally answered prompts
- persona.py   → system instruction blocks sent with every model call
"""

from jai_backend.prompts.persona import PersonaPrompts
from jai_backend.prompts.shortcuts import ShortcutPrompts

__all__ = [
    "PersonaPrompts",
    "ShortcutPrompts",
]

"""
Chat services used by the SendMessage command.

- shortcut_router.py        → local answers for identity / date prompts
- memory_synthesizer.py     → digest of the user's other conversations
- persona_prompt_builder.py → system instruction assembly
- model_gateway.py          → provider-agnostic completion call
"""

from jai_backend.services.memory_synthesizer import MemorySynthesizer
from jai_backend.services.model_gateway import ModelGateway
from jai_backend.services.persona_prompt_builder import PersonaPromptBuilder
from jai_backend.services.shortcut_router import ShortcutCategory, ShortcutRouter

__all__ = [
    "MemorySynthesizer",
    "ModelGateway",
    "PersonaPromptBuilder",
    "ShortcutCategory",
    "ShortcutRouter",
]

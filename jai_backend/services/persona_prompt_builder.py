"""
Persona prompt builder - assembles the system instruction for a model call.
"""

from jai_backend.prompts.persona import PersonaPrompts


class PersonaPromptBuilder:
    def build(self, memory_digest: str, reasoning_mode: bool = False) -> str:
        blocks = [
            PersonaPrompts.IDENTITY,
            PersonaPrompts.NO_VENDOR_DISCLOSURE,
            PersonaPrompts.ORIGIN,
            memory_digest,
        ]
        if reasoning_mode:
            blocks.append(PersonaPrompts.REASONING)
        blocks.append(PersonaPrompts.PURPOSE)
        return "\n\n".join(blocks)

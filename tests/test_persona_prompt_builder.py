from jai_backend.prompts.persona import PersonaPrompts
from jai_backend.services.persona_prompt_builder import PersonaPromptBuilder

DIGEST = 'Topic: "Sorting". Last Exchange: ai: "Use sorted()..."'


def test_blocks_in_order_with_digest_verbatim():
    instruction = PersonaPromptBuilder().build(DIGEST)

    positions = [
        instruction.index(PersonaPrompts.IDENTITY),
        instruction.index(PersonaPrompts.NO_VENDOR_DISCLOSURE),
        instruction.index(PersonaPrompts.ORIGIN),
        instruction.index(DIGEST),
        instruction.index(PersonaPrompts.PURPOSE),
    ]
    assert positions == sorted(positions)
    assert instruction.endswith(PersonaPrompts.PURPOSE)


def test_reasoning_directive_only_when_enabled():
    builder = PersonaPromptBuilder()

    assert "<thought>" not in builder.build(DIGEST)

    with_reasoning = builder.build(DIGEST, reasoning_mode=True)
    assert PersonaPrompts.REASONING in with_reasoning
    assert with_reasoning.index(DIGEST) < with_reasoning.index(PersonaPrompts.REASONING)
    assert with_reasoning.index(PersonaPrompts.REASONING) < with_reasoning.index(
        PersonaPrompts.PURPOSE
    )


def test_persona_names_jai_and_its_creator():
    instruction = PersonaPromptBuilder().build(DIGEST)
    assert f'named "{PersonaPrompts.ASSISTANT_NAME}"' in instruction
    assert PersonaPrompts.CREATOR_NAME in instruction
    assert PersonaPrompts.ORGANIZATION in instruction
    assert f"persona of {PersonaPrompts.ASSISTANT_NAME} from" in instruction

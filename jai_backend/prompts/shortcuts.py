"""
Shortcut phrase sets and canned replies.

Prompts matching one of these phrases are answered locally and never reach
the language model. Phrases are matched as substrings of the normalized
prompt (lower-cased, with ? . , ! removed).
"""


class ShortcutPrompts:
    """Keyword data for the shortcut router."""

    IDENTITY_PHRASES: tuple[str, ...] = (
        "who are you",
        "what are you",
        "who created you",
        "who made you",
        "who developed you",
        "who is your developer",
        "your creator",
        "your developer",
        "your name",
        "what is your name",
        "about yourself",
        "tell me about yourself",
        "what model are you",
        "which model are you",
        "who trained you",
        "where are you from",
    )

    DATE_PHRASES: tuple[str, ...] = (
        "date today",
        "today date",
        "what is the date today",
        "today's date",
        "current date",
        "what is today's date",
        "what day is it today",
    )

    # Characters removed before matching
    STRIPPED_CHARACTERS = "?.,!"

    IDENTITY_RESPONSE = """I am Jai, a specialized coding assistant. I was developed by Lohith at Jairisys, a startup based in India.

My purpose is to help you with programming questions by providing accurate code, clear explanations, and useful examples. My core intelligence is powered by advanced AI models, but my specific persona and functionality were designed by my developer."""

    DATE_RESPONSE_TEMPLATE = "Today is {date} (India/Mumbai time)."

    DATE_TIMEZONE = "Asia/Kolkata"

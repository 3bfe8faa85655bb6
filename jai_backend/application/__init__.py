"""
Application Layer - use cases (commands and queries).

- commands/chat/          → send_message (the chat orchestrator)
- commands/conversations/ → delete_conversation
- queries/conversations/  → list_conversations, get_conversation
- dto/                    → API response shapes
"""

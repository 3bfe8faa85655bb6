"""
COMMANDS - Write operations (CQRS)

Subfolders:
- chat/          → send_message
- conversations/ → delete_conversation
"""

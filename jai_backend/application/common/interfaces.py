"""
Command/query base classes for the application layer.

Commands change state (send a message, delete a conversation); queries only
read. Each has exactly one handler, resolved per request from the DI
container. The type parameter is what execute() returns.

    @dataclass(frozen=True)
    class DeleteConversationCommand(Command[bool]):
        conversation_id: ConversationId
        user_id: UserId

    class DeleteConversationHandler(CommandHandler[bool]):
        async def execute(self, command: DeleteConversationCommand) -> bool:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


class Command(ABC, Generic[ResultT]):
    """A request to change a user's conversations."""


class CommandHandler(ABC, Generic[ResultT]):
    @abstractmethod
    async def execute(self, command: Command[ResultT]) -> ResultT: ...


class Query(ABC, Generic[ResultT]):
    """A read-only request; never persists anything."""


class QueryHandler(ABC, Generic[ResultT]):
    @abstractmethod
    async def execute(self, query: Query[ResultT]) -> ResultT: ...

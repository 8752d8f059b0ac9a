"""
Message handling helper functions
Static entry points used by the screen handlers
"""

from typing import Optional

from telegram import Message, Update

from botapp.messages.components import MessageResponder, delete_message_safe

_responder = MessageResponder()


class MessageHandlers:
    """Collection of message handling helpers"""

    @staticmethod
    async def edit_or_reply(update: Update, text: str, **kwargs) -> None:
        """Edit message if it's a callback query, otherwise reply"""
        await _responder.edit_or_reply(update, text, **kwargs)

    @staticmethod
    async def delete_message_safe(message: Optional[Message]) -> bool:
        """Safely delete a message"""
        return await delete_message_safe(message)

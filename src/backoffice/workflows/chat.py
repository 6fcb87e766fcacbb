"""Chat session between the brand and one influencer of a campaign.

Messages are kept in chronological order and deduplicated by id, so a
message delivered both by polling and by the send response appears once.
"""

from __future__ import annotations

import structlog

from backoffice.api import chat as chat_api
from backoffice.api.client import BackofficeClient
from backoffice.domain.models import ChatMessage

logger = structlog.get_logger()


class ChatSession:
    """Message history for one campaign/influencer conversation.

    Args:
        client: API client with a workspace selected.
        campaign_id: The campaign the conversation belongs to.
        influencer_id: The influencer's user id; messages sent by this id
            are shown as coming from the influencer.
    """

    def __init__(self, client: BackofficeClient, campaign_id: str, influencer_id: str) -> None:
        self._client = client
        self.campaign_id = campaign_id
        self.influencer_id = influencer_id
        self._messages: list[ChatMessage] = []
        self._seen: set[str] = set()

    @property
    def messages(self) -> list[ChatMessage]:
        """Return the messages, oldest first."""
        return list(self._messages)

    async def load_history(self) -> list[ChatMessage]:
        """Replace the local history with the server's, oldest first."""
        fetched = await chat_api.list_messages(self._client, self.campaign_id, self.influencer_id)
        self._messages = []
        self._seen = set()
        for message in reversed(fetched):
            self.receive(message)
        logger.debug(
            "chat_history_loaded",
            campaign_id=self.campaign_id,
            influencer_id=self.influencer_id,
            count=len(self._messages),
        )
        return self.messages

    def receive(self, message: ChatMessage) -> bool:
        """Append *message* unless it is already present.

        Returns:
            True if the message was new.
        """
        if message.id in self._seen:
            return False
        self._seen.add(message.id)
        self._messages.append(message)
        return True

    async def refresh(self) -> list[ChatMessage]:
        """Poll the server and merge, returning only the new messages."""
        fetched = await chat_api.list_messages(self._client, self.campaign_id, self.influencer_id)
        return [message for message in reversed(fetched) if self.receive(message)]

    async def send(self, text: str, attachments: list[str] | None = None) -> ChatMessage | None:
        """Send a message; the echoed message is added to the history.

        Raises:
            ValueError: If *text* is blank and there are no attachments.
        """
        if not text.strip() and not attachments:
            raise ValueError("Cannot send an empty message")
        sent = await chat_api.send_message(
            self._client, self.campaign_id, self.influencer_id, text, attachments
        )
        if sent is not None:
            self.receive(sent)
        return sent

    def is_from_influencer(self, message: ChatMessage) -> bool:
        return message.sender_id == self.influencer_id

    def unread_from_influencer(self) -> list[ChatMessage]:
        """Return the influencer's messages that have not been read yet."""
        return [m for m in self._messages if self.is_from_influencer(m) and m.read_at is None]

"""Slack Bot API client for sending messages."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

import requests

from slack_aws_cost_notifier.errors import DeliveryFailedError


class SlackNotifier(Protocol):
    """Anything that can post a message to the channel it was built for."""

    channel_id: str

    def send_message(self, text: str, channel: str | None = None) -> dict[str, Any]: ...

    def send_blocks(
        self,
        blocks: list[dict[str, Any]],
        text: str = "",
        channel: str | None = None,
    ) -> dict[str, Any]: ...


SlackClientFactory = Callable[[str, str], SlackNotifier]


class SlackBotClient:
    """
    Client for sending messages via the Slack Web API.

    Messages go to ``channel_id`` unless a channel is given per call. Any
    failure to deliver (network error, HTTP error, or a response with
    ``ok: false``) raises DeliveryFailedError.
    """

    BASE_URL = "https://slack.com/api"

    def __init__(self, bot_token: str, channel_id: str, timeout: float = 10.0):
        """
        Initialize the Slack Bot client.

        Args:
            bot_token: Slack Bot User OAuth Token (xoxb-...).
            channel_id: Default destination channel (C...).
            timeout: Request timeout in seconds.
        """
        self.bot_token = bot_token
        self.channel_id = channel_id
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({
            "Authorization": f"Bearer {bot_token}",
            "Content-Type": "application/json; charset=utf-8",
        })

    def send_message(self, text: str, channel: str | None = None) -> dict[str, Any]:
        """
        Send a text message.

        Args:
            text: Message text (supports Slack mrkdwn formatting).
            channel: Channel ID (C...), DM ID (D...), or user ID (U...).
                Defaults to the client's channel.

        Returns:
            Slack API response dict with 'ok', 'ts', etc.
        """
        payload = {"channel": channel or self.channel_id, "text": text}
        return self._post("chat.postMessage", payload)

    def send_blocks(
        self,
        blocks: list[dict[str, Any]],
        text: str = "",
        channel: str | None = None,
    ) -> dict[str, Any]:
        """
        Send a Block Kit message.

        Args:
            blocks: List of Block Kit blocks.
            text: Fallback text for notifications.
            channel: Channel ID. Defaults to the client's channel.

        Returns:
            Slack API response dict.
        """
        payload = {
            "channel": channel or self.channel_id,
            "blocks": blocks,
            "text": text or "AWS usage cost",
        }
        return self._post("chat.postMessage", payload)

    def _post(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Make a POST request to the Slack API.

        Raises:
            DeliveryFailedError: On network errors or a Slack-level error.
        """
        url = f"{self.BASE_URL}/{method}"

        try:
            response = self._session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            print(f"Slack API request failed ({method}): {e}")
            raise DeliveryFailedError(f"Could not send message: {e}") from e
        except ValueError as e:
            raise DeliveryFailedError(f"Invalid JSON from Slack ({method})") from e

        if not data.get("ok"):
            error = data.get("error", "unknown_error")
            print(f"Slack API error ({method}): {error}")
            raise DeliveryFailedError(f"Slack API error: {error}")

        return data

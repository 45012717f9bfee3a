"""WhatsApp delivery through the Twilio Messages REST API."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from ipoalert.core.config import IPOAlertSettings
from ipoalert.core.exceptions import DeliveryError
from ipoalert.core.logging import logger

TWILIO_API_BASE = "https://api.twilio.com/2010-04-01"


@dataclass
class DeliveryResult:
    """Delivery outcome for a single recipient."""

    recipient: str
    sid: str | None = None
    error: DeliveryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WhatsAppNotifier:
    """Send text messages to WhatsApp addresses via Twilio."""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_address: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_address = from_address
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: IPOAlertSettings, **kwargs) -> "WhatsAppNotifier":
        return cls(
            settings.twilio_account_sid,
            settings.twilio_auth_token,
            settings.twilio_whatsapp_from,
            **kwargs,
        )

    @property
    def messages_url(self) -> str:
        return f"{TWILIO_API_BASE}/Accounts/{self.account_sid}/Messages.json"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            auth=(self.account_sid, self.auth_token),
            timeout=httpx.Timeout(self.timeout),
            transport=self.transport,
        )

    async def _post(self, client: httpx.AsyncClient, to: str, body: str) -> str:
        data = {"To": to, "From": self.from_address, "Body": body}
        try:
            response = await client.post(self.messages_url, data=data)
        except httpx.HTTPError as exc:
            raise DeliveryError(f"failed to send message: {exc}", to) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        if response.is_error:
            raise DeliveryError(
                f"failed to send message: {payload.get('message') or response.reason_phrase}",
                to,
                status_code=response.status_code,
                provider_code=payload.get("code"),
            )

        sid = payload.get("sid", "")
        logger.info("message sent successfully", sid=sid)
        return sid

    async def send(self, to: str, body: str) -> str:
        """Deliver ``body`` to ``to``; returns the provider message SID.

        Raises:
            DeliveryError: If the request fails or the provider rejects it
        """
        async with self._client() as client:
            return await self._post(client, to, body)

    async def broadcast(self, recipients: Sequence[str], body: str) -> list[DeliveryResult]:
        """Send ``body`` to every recipient; one failure never stops the rest."""
        results: list[DeliveryResult] = []
        async with self._client() as client:
            for recipient in recipients:
                try:
                    sid = await self._post(client, recipient, body)
                except DeliveryError as exc:
                    logger.bind(error_code=exc.error_code).error(
                        "delivery failed for {}: {}", recipient, exc.message
                    )
                    results.append(DeliveryResult(recipient=recipient, error=exc))
                else:
                    results.append(DeliveryResult(recipient=recipient, sid=sid))
        return results


__all__ = ["DeliveryResult", "WhatsAppNotifier", "TWILIO_API_BASE"]

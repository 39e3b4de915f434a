"""seo_gateway.contact: обработчик контактной формы.

Проверяет поля, экранирует HTML и отправляет одно письмо через HTTP API
почтового сервиса (совместим с Resend). Повторов и очередей нет: одна попытка,
ошибка превращается в 500.
"""
from __future__ import annotations

import asyncio
import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from aiohttp import ClientError, ClientSession, ClientTimeout
from jinja2 import Environment, select_autoescape
from markupsafe import Markup, escape

from seo_gateway.config import ContactConfig
from seo_gateway.errors import ContactValidationError, MailDeliveryError
from seo_gateway.logger import logger
from seo_gateway.models import GatewayResponse

__all__ = [
    "SUBJECT_LABELS",
    "ContactMessage",
    "MailEnvelope",
    "MailSender",
    "ContactHandler",
    "render_contact_html",
    "json_response",
]

SUBJECT_LABELS: Dict[str, str] = {
    "support": "Support Request",
    "feature": "Feature Request",
    "bug": "Bug Report",
    "feedback": "General Feedback",
    "other": "Other",
}

_REQUIRED_FIELDS = ("name", "email", "subject", "message")

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

_EMAIL_TEMPLATE = """
<h2>New Contact Form Submission</h2>
<p><strong>Name:</strong> {{ msg.name }}</p>
<p><strong>Email:</strong> {{ msg.email }}</p>
<p><strong>Subject:</strong> {{ msg.subject_label }}</p>
<p><strong>Message:</strong></p>
<p>{{ msg.message | nl2br }}</p>
"""


def _nl2br(value: str) -> Markup:
    return escape(value).replace("\n", Markup("<br>"))


_env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))
_env.filters["nl2br"] = _nl2br


@dataclass(slots=True, frozen=True)
class ContactMessage:
    """Одна отправка формы."""

    name: str
    email: str
    subject: str
    message: str

    @classmethod
    def from_payload(cls, data: Any) -> ContactMessage:
        if not isinstance(data, Mapping):
            raise ContactValidationError("All fields are required")
        missing = [f for f in _REQUIRED_FIELDS if not data.get(f)]
        if missing:
            raise ContactValidationError("All fields are required")
        return cls(*(str(data[f]) for f in _REQUIRED_FIELDS))

    @property
    def subject_label(self) -> str:
        return SUBJECT_LABELS.get(self.subject, self.subject)


@dataclass(slots=True, frozen=True)
class MailEnvelope:
    sender: str
    to: str
    reply_to: str
    subject: str
    html: str

    def payload(self) -> Dict[str, Any]:
        return {
            "from": self.sender,
            "to": [self.to],
            "reply_to": self.reply_to,
            "subject": self.subject,
            "html": self.html,
        }


def render_contact_html(msg: ContactMessage) -> str:
    """HTML-тело письма; все поля экранируются, переводы строк → <br>."""
    return _env.from_string(_EMAIL_TEMPLATE).render(msg=msg)


class MailSender:
    """Sends one envelope to the mail API over HTTP."""

    def __init__(self, api_url: str, api_key: str, timeout: float) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    async def send(self, envelope: MailEnvelope) -> Optional[str]:
        """POST the envelope; return the message id reported by the API."""
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            async with ClientSession(timeout=ClientTimeout(total=self.timeout)) as session:
                async with session.post(self.api_url, json=envelope.payload(), headers=headers) as resp:
                    text = await resp.text()
                    if resp.status >= 400:
                        raise MailDeliveryError(
                            f"Mail API returned {resp.status}: {text[:200]}", status=resp.status
                        )
        except (ClientError, asyncio.TimeoutError) as exc:
            raise MailDeliveryError(f"Mail API request failed: {exc}") from exc

        try:
            data = json.loads(text) if text else {}
        except json.JSONDecodeError:
            return None
        return data.get("id") if isinstance(data, dict) else None


SenderFactory = Callable[[str, str, float], MailSender]


def json_response(status: int, payload: Dict[str, Any]) -> GatewayResponse:
    return GatewayResponse(
        status=status,
        headers={"Content-Type": "application/json", "Access-Control-Allow-Origin": "*"},
        body=json.dumps(payload).encode("utf-8"),
    )


class ContactHandler:
    """Обрабатывает один запрос контактной формы."""

    def __init__(
        self,
        config: ContactConfig,
        sender_factory: SenderFactory = MailSender,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config = config
        self._sender_factory = sender_factory
        self._environ = environ

    def build_envelope(self, msg: ContactMessage) -> MailEnvelope:
        return MailEnvelope(
            sender=self.config.sender,
            to=self.config.recipient,
            reply_to=msg.email,
            subject=f"Contact: {msg.subject_label} - {msg.name}",
            html=render_contact_html(msg),
        )

    async def handle(self, method: str, body: Union[str, bytes, None]) -> GatewayResponse:
        if method == "OPTIONS":
            return GatewayResponse(status=200, headers=CORS_HEADERS, body=b"")
        if method != "POST":
            return json_response(405, {"error": "Method not allowed"})

        try:
            return await self._submit(body)
        except Exception:
            logger.exception("Unexpected error while handling contact form")
            return json_response(500, {"error": "Failed to send email"})

    async def _submit(self, body: Union[str, bytes, None]) -> GatewayResponse:
        try:
            msg = ContactMessage.from_payload(json.loads(body or "{}"))
        except ContactValidationError as exc:
            return json_response(400, {"error": str(exc)})
        except ValueError as exc:
            logger.error("Contact form body is not valid JSON: %s", exc)
            return json_response(500, {"error": "Failed to send email"})

        environ = os.environ if self._environ is None else self._environ
        api_key = environ.get(self.config.api_key_env)
        if not api_key:
            logger.error("%s not configured", self.config.api_key_env)
            return json_response(500, {"error": "Server configuration error"})

        sender = self._sender_factory(self.config.api_url, api_key, self.config.timeout)
        try:
            message_id = await sender.send(self.build_envelope(msg))
        except MailDeliveryError as exc:
            logger.error("Failed to send contact email: %s", exc)
            return json_response(500, {"error": "Failed to send email"})

        logger.info("Contact email sent (id=%s, subject=%s)", message_id, msg.subject)
        return json_response(200, {"success": True})

"""Utility helpers for sending transactional email via SendGrid."""

from __future__ import annotations

import json
import logging
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from nutritrack.config import Settings

logger = logging.getLogger(__name__)


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages = [
                str(item["message"])
                for item in errors
                if isinstance(item, dict) and item.get("message")
            ]
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _log_sendgrid_failure(source: Any, *, exc: Exception | None = None) -> None:
    status_code = getattr(source, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(source, "body", None))

    if status_code and details:
        logger.error("SendGrid request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid request failed: %s", details)
    elif exc is not None:
        logger.exception("Error sending email via SendGrid: %s", exc)
    else:
        logger.error("SendGrid request failed without details")


def send_email(subject: str, html_content: str, recipient: str, settings: Settings) -> bool:
    """Send an email using the configured SendGrid credentials.

    Returns ``False`` when delivery is disabled or SendGrid rejects the request.
    """

    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid configuration incomplete; skipping email delivery")
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )

    try:
        client = SendGridAPIClient(settings.sendgrid_api_key)
        response = client.send(message)
    except Exception as exc:  # pragma: no cover - network failures depend on environment
        _log_sendgrid_failure(exc, exc=exc)
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_sendgrid_failure(response)
        return False

    return True


def send_password_reset_email(recipient: str, reset_url: str, settings: Settings) -> bool:
    """Send the password reset link to ``recipient``."""

    subject = "Reset your NutriTrack password"
    html_content = "".join(
        (
            "<p>Hello,</p>",
            "<p>We received a request to reset your password.</p>",
            f'<p><a href="{reset_url}">Choose a new password</a></p>',
            f"<p>The link expires in {settings.password_reset_expire_minutes} minutes.</p>",
            "<p>If you did not ask for this, you can ignore this email.</p>",
        )
    )
    return send_email(subject, html_content, recipient, settings)


__all__ = ["send_email", "send_password_reset_email"]

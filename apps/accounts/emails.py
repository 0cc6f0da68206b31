"""
Transactional email powered by SendGrid.

Centralises outbound email so services stay thin and the integration is
easy to mock.  Sending never raises: failures are logged and reported as
``False`` to the caller.
"""

import logging

from django.conf import settings

logger = logging.getLogger(__name__)


def _send_email(*, to_email, subject, html_content):
    """
    Send a single email via the SendGrid Web API.

    Returns ``True`` on success, ``False`` if the key is missing or the
    API call fails.
    """
    api_key = getattr(settings, "SENDGRID_API_KEY", "")
    if not api_key:
        logger.warning("SENDGRID_API_KEY not configured: email to %s not sent.", to_email)
        return False

    from sendgrid import SendGridAPIClient
    from sendgrid.helpers.mail import Mail

    message = Mail(
        from_email=getattr(settings, "DEFAULT_FROM_EMAIL", "noreply@stagehand.app"),
        to_emails=to_email,
        subject=subject,
        html_content=html_content,
    )

    try:
        response = SendGridAPIClient(api_key).send(message)
        logger.info("Email sent to %s: status %s", to_email, response.status_code)
        return True
    except Exception as exc:
        logger.error("SendGrid send failed for %s: %s", to_email, exc)
        return False


def send_password_reset_email(user, reset_url):
    """Email ``user`` a one-time link to ``reset_url`` (valid one hour)."""
    html = (
        f"<div style='font-family:sans-serif;max-width:600px;margin:auto'>"
        f"<h2>Reset your password</h2>"
        f"<p>Hi {user.username},</p>"
        f"<p>Someone asked to reset the password on your Stagehand account. "
        f"Use the link below to choose a new one:</p>"
        f"<p style='text-align:center;margin:32px 0'>"
        f"<a href='{reset_url}' style='background:#7c3aed;color:#fff;"
        f"padding:12px 32px;border-radius:6px;text-decoration:none'>"
        f"Reset Password</a></p>"
        f"<p style='font-size:13px;word-break:break-all'>{reset_url}</p>"
        f"<p style='font-size:12px;color:#94a3b8'>The link expires in 1 hour. "
        f"If you did not ask for this, ignore this email.</p>"
        f"</div>"
    )
    return _send_email(
        to_email=user.email,
        subject="Reset your Stagehand password",
        html_content=html,
    )


def send_welcome_email(user):
    """Welcome a newly registered musician, organizer, or admin."""
    html = (
        f"<div style='font-family:sans-serif;max-width:600px;margin:auto'>"
        f"<h2>Welcome to Stagehand!</h2>"
        f"<p>Hi {user.username},</p>"
        f"<p>Your {user.get_role_display().lower()} account is ready. "
        f"Sign in to set up your profile.</p>"
        f"<p style='text-align:center;margin:32px 0'>"
        f"<a href='{settings.FRONTEND_BASE_URL}/login' style='background:#7c3aed;"
        f"color:#fff;padding:12px 32px;border-radius:6px;"
        f"text-decoration:none'>Sign in</a></p>"
        f"</div>"
    )
    return _send_email(
        to_email=user.email,
        subject="Welcome to Stagehand",
        html_content=html,
    )

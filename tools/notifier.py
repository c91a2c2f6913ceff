"""
Notifier — user-facing status messages for extractions.
Console toasts for interactive use, plus an HTML email summary over stdlib smtplib.
"""

import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from datetime import datetime, timezone
from html import escape

from models.extraction import ExtractionResult
from strategies.url_heuristic import PLACEHOLDER_ROLE


STATUS_ICONS = {
    "success": "✅",
    "info": "ℹ️ ",
    "error": "❌",
}


def build_status_message(result: ExtractionResult) -> tuple[str, str]:
    """
    Describe an extraction outcome the way the add-application form does.

    Returns:
        (status, message) where status is "success" or "info".
    """
    if result.is_usable():
        message = f"Successfully extracted job details! Company: {result.organization}, Role: {result.role_title}"
        if result.location:
            message += f", Location: {result.location}"
        return "success", message

    if result.role_title and result.role_title != PLACEHOLDER_ROLE:
        return (
            "success",
            f"Successfully extracted job title: {result.role_title}. "
            "Please select or create the company below.",
        )

    return (
        "info",
        "LinkedIn job detected, but automatic extraction could not read the full posting. "
        "Please fill in the remaining details manually.",
    )


def notify(status: str, message: str) -> None:
    """Print a one-line toast for the given status."""
    icon = STATUS_ICONS.get(status, "•")
    print(f"{icon} [{status.upper()}] {message}")


def _posting_card(result: ExtractionResult) -> str:
    title = escape(result.role_title or "Untitled posting")
    if result.posting_url:
        title = f'<a href="{escape(result.posting_url, quote=True)}" style="color:#0a66c2;">{title}</a>'

    details = " · ".join(escape(value) for value in (result.organization, result.location) if value)
    if result.needs_manual_completion:
        badge = '<span style="color:#b45309;">needs manual details</span>'
    else:
        badge = f'<span style="color:#15803d;">via {escape(result.source)}</span>'

    return (
        '<li style="margin:0 0 14px;">'
        f'<div style="font-weight:600;">{title}</div>'
        f'<div style="color:#4b5563;font-size:13px;">{details or "Company unknown"} · {badge}</div>'
        "</li>"
    )


def _build_html_email(results: list[ExtractionResult]) -> str:
    """Build an HTML email body with one card per extracted posting."""
    generated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    cards = "".join(_posting_card(result) for result in results)
    return (
        '<html><body style="font-family:Helvetica,Arial,sans-serif;padding:16px;">'
        f'<h2 style="margin:0 0 4px;">{len(results)} job posting(s) extracted</h2>'
        f'<p style="color:#6b7280;margin:0 0 16px;font-size:12px;">{generated}</p>'
        f'<ul style="list-style:none;padding:0;">{cards}</ul>'
        "</body></html>"
    )


def _build_plain_text(results: list[ExtractionResult]) -> str:
    lines = [f"Extracted {len(results)} posting(s):", ""]
    for result in results:
        lines.append(f"- {result.role_title or '?'} at {result.organization or '?'} ({result.location or 'location unknown'})")
        if result.posting_url:
            lines.append(f"  {result.posting_url}")
    return "\n".join(lines)


def send_email_notification(
    results: list[ExtractionResult],
    recipient: str,
    smtp_host: str,
    smtp_port: int,
    smtp_user: str,
    smtp_password: str,
    sender: str = None,
) -> bool:
    """
    Email a summary of extracted postings for review.

    smtp_port 465 uses implicit TLS, any other port STARTTLS. The sender
    defaults to smtp_user.

    Returns:
        True once the message is handed to the server, False on any SMTP or
        network failure (or when there is nothing to send).
    """
    if not results:
        print("[Notifier] Nothing to email.")
        return False

    sender = sender or smtp_user

    msg = MIMEMultipart("alternative")
    msg["Subject"] = f"Job Posting Extractor: {len(results)} posting(s) ready to review"
    msg["From"] = sender
    msg["To"] = recipient
    msg.attach(MIMEText(_build_plain_text(results), "plain"))
    msg.attach(MIMEText(_build_html_email(results), "html"))

    # Port 465 is implicit TLS; anything else upgrades with STARTTLS
    smtp_class = smtplib.SMTP_SSL if smtp_port == 465 else smtplib.SMTP

    print(f"[Notifier] Sending summary to {recipient} via {smtp_host}:{smtp_port}...")
    try:
        with smtp_class(smtp_host, smtp_port, timeout=30) as server:
            if smtp_class is smtplib.SMTP:
                server.starttls()
            server.login(smtp_user, smtp_password)
            server.sendmail(sender, [recipient], msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        print(f"[Notifier] ❌ Email not sent: {e}")
        return False

    print(f"[Notifier] ✅ Summary sent ({len(results)} postings)")
    return True

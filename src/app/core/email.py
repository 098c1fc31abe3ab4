"""
Email Service using Resend

Sends application status notifications to applicants. Without an API key
the message is logged instead of sent.
"""

import asyncio
import logging
from datetime import date
from html import escape

import resend

from app.core.config import settings

logger = logging.getLogger(__name__)

resend.api_key = settings.resend_api_key or None

_STYLE = """
    body { font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; color: #1f2937; }
    .container { max-width: 600px; margin: 0 auto; padding: 40px 20px; }
    .header { color: #14532d; margin-bottom: 24px; }
    .box { background-color: #f0fdf4; border: 1px solid #bbf7d0; padding: 16px; border-radius: 8px; margin: 16px 0; }
    .box p { margin: 0; }
    .button { display: inline-block; background-color: #14532d; color: white; padding: 14px 28px; text-decoration: none; border-radius: 8px; margin: 24px 0; }
    .footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb; color: #6b7280; font-size: 14px; }
"""


async def send_email(
    to_email: str,
    subject: str,
    html_content: str,
) -> bool:
    """
    Send an email using Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject line
        html_content: HTML content of the email

    Returns:
        True if email was sent (or logged in place of sending)
    """
    if not resend.api_key:
        logger.warning("RESEND_API_KEY not set - logging email instead of sending")
        logger.info(f"EMAIL TO: {to_email} | SUBJECT: {subject}")
        return True

    try:
        params: resend.Emails.SendParams = {
            "from": settings.email_from,
            "to": [to_email],
            "subject": subject,
            "html": html_content,
        }

        # Resend's client is synchronous
        email = await asyncio.to_thread(resend.Emails.send, params)
        logger.info(f"Email sent successfully to {to_email}, id: {email['id']}")
        return True
    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return False


def _render(title: str, applicant_name: str, body: str) -> str:
    dashboard_url = f"{settings.frontend_url}/dashboard"
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <style>{_STYLE}</style>
    </head>
    <body>
        <div class="container">
            <h1 class="header">{escape(title)}</h1>

            <p>Dear {escape(applicant_name)},</p>

            {body}

            <a href="{dashboard_url}" class="button">View your applications</a>

            <div class="footer">
                <p>County Public Service Board</p>
            </div>
        </div>
    </body>
    </html>
    """


async def send_application_shortlisted(
    to_email: str,
    applicant_name: str,
    job_title: str,
    interview_date: date | None = None,
) -> bool:
    """Tell the applicant they have been shortlisted."""
    interview_line = (
        f"<div class=\"box\"><p><strong>Interview date:</strong> {interview_date:%d %B %Y}</p></div>"
        if interview_date
        else "<p>The interview date will be communicated shortly.</p>"
    )
    body = f"""
            <p>Your application for <strong>{escape(job_title)}</strong> has been shortlisted.</p>
            {interview_line}
    """
    return await send_email(
        to_email=to_email,
        subject=f"Shortlisted: {job_title}",
        html_content=_render("You have been shortlisted", applicant_name, body),
    )


async def send_interview_recorded(
    to_email: str,
    applicant_name: str,
    job_title: str,
) -> bool:
    """Confirm that the applicant's interview has been assessed."""
    body = f"""
            <p>Thank you for attending the interview for <strong>{escape(job_title)}</strong>.</p>
            <p>Your assessment has been recorded and the board will communicate the outcome.</p>
    """
    return await send_email(
        to_email=to_email,
        subject=f"Interview completed: {job_title}",
        html_content=_render("Interview completed", applicant_name, body),
    )


async def send_application_rejected(
    to_email: str,
    applicant_name: str,
    job_title: str,
    remarks: str,
) -> bool:
    """Send notification that the application was unsuccessful."""
    body = f"""
            <p>Thank you for your interest in the position of <strong>{escape(job_title)}</strong>.
            We regret to inform you that your application was not successful.</p>
            <div class="box">
                <p><strong>Remarks:</strong></p>
                <p>{escape(remarks)}</p>
            </div>
            <p>You are welcome to apply for other advertised positions.</p>
    """
    return await send_email(
        to_email=to_email,
        subject=f"Update on your application: {job_title}",
        html_content=_render("Application update", applicant_name, body),
    )


async def send_application_hired(
    to_email: str,
    applicant_name: str,
    job_title: str,
) -> bool:
    """Congratulate the applicant on their appointment."""
    body = f"""
            <p>Congratulations! You have been selected for the position of
            <strong>{escape(job_title)}</strong>.</p>
            <p>The Board will contact you with the appointment letter and reporting details.</p>
    """
    return await send_email(
        to_email=to_email,
        subject=f"Appointment: {job_title}",
        html_content=_render("Congratulations", applicant_name, body),
    )

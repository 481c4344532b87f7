"""
Notifications Module - Contact relay over the Resend email API
"""

import requests
from flask import current_app
from markupsafe import escape
from .errors import RemoteError
from .validators import validate_contact, validate_recipient

CONFIRMATION_SUBJECT = "Thank you for contacting us!"

NOTIFICATION_TEMPLATE = """
<h2>New Contact Form Submission</h2>
<p><strong>From:</strong> {name} ({email})</p>
<p><strong>Subject:</strong> {subject}</p>
<div style="margin-top: 20px; padding: 15px; background-color: #f5f5f5; border-left: 4px solid #3b82f6;">
  <p><strong>Message:</strong></p>
  <p style="white-space: pre-wrap;">{message}</p>
</div>
"""

CONFIRMATION_TEMPLATE = """
<h1>Thank you for reaching out, {name}!</h1>
<p>We have received your message and will get back to you as soon as possible.</p>
<div style="margin-top: 20px; padding: 15px; background-color: #f5f5f5; border-left: 4px solid #3b82f6;">
  <p><strong>Your message:</strong></p>
  <p style="white-space: pre-wrap;">{message}</p>
</div>
<p style="margin-top: 30px;">Best regards,<br>The Team</p>
"""


def get_resend_config():
    """Load Resend settings from the app config"""
    return {
        'api_key': current_app.config.get('RESEND_API_KEY'),
        'api_url': current_app.config.get('RESEND_API_URL', 'https://api.resend.com/emails'),
        'timeout': current_app.config.get('RESEND_TIMEOUT', 10)
    }


def send_email(payload):
    """
    Send one email through the Resend API

    Args:
        payload (dict): from, to, subject, html and optional reply_to

    Returns:
        dict: API response body (contains the email id)

    Raises:
        RemoteError: Missing API key, transport failure, non-2xx response or
            unreadable response body
    """
    config = get_resend_config()
    if not config['api_key']:
        current_app.logger.error("RESEND_API_KEY is not configured")
        raise RemoteError("Email service is not configured")

    headers = {
        'Content-Type': 'application/json',
        'Authorization': f"Bearer {config['api_key']}"
    }
    try:
        response = requests.post(config['api_url'], json=payload, headers=headers,
                                 timeout=config['timeout'])
    except requests.RequestException as e:
        current_app.logger.error(f"Resend request failed: {str(e)}")
        raise RemoteError(f"Resend API error: {str(e)}")

    if not response.ok:
        current_app.logger.error(f"Resend API error {response.status_code}: {response.text}")
        raise RemoteError(f"Resend API error: {response.text}")

    try:
        return response.json()
    except ValueError as e:
        current_app.logger.error(f"Resend API returned a non-JSON body: {str(e)}")
        raise RemoteError("Resend API error: invalid response body")


def build_notification_email(submission, recipient):
    """Owner notification; reply-to goes back to the submitter"""
    safe = {key: escape(value) for key, value in submission.items()}
    return {
        'from': current_app.config.get('CONTACT_FROM_NOTIFICATION'),
        'to': [recipient],
        'reply_to': submission['email'],
        'subject': f"Contact Form: {submission['subject']}",
        'html': NOTIFICATION_TEMPLATE.format(**safe)
    }


def build_confirmation_email(submission):
    """Confirmation sent back to the submitter"""
    safe = {key: escape(value) for key, value in submission.items()}
    return {
        'from': current_app.config.get('CONTACT_FROM_CONFIRMATION'),
        'to': [submission['email']],
        'subject': CONFIRMATION_SUBJECT,
        'html': CONFIRMATION_TEMPLATE.format(**safe)
    }


def relay_contact(payload, recipient):
    """
    Validate a contact submission and send the two emails

    The owner notification goes first, the submitter confirmation second.
    Nothing is sent when validation fails; a failed send stops the relay.

    Raises:
        ValidationError: Invalid field or recipient
        RemoteError: Either email could not be sent
    """
    submission = validate_contact(payload)
    recipient = validate_recipient(recipient)

    current_app.logger.info(f"Processing contact form from {submission['email']}")

    notification = send_email(build_notification_email(submission, recipient))
    current_app.logger.info(f"Notification email sent: {notification.get('id')}")

    confirmation = send_email(build_confirmation_email(submission))
    current_app.logger.info(f"Confirmation email sent: {confirmation.get('id')}")

    return notification, confirmation


__all__ = [
    'send_email',
    'build_notification_email',
    'build_confirmation_email',
    'relay_contact'
]

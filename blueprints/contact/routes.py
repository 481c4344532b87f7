"""
Contact Routes - Landing page contact form and the public email relay
"""

from flask import redirect, url_for, request, flash, jsonify, make_response, current_app
from utils.errors import PortfolioError, ValidationError, RemoteError
from utils.notifications import relay_contact
from utils.security import add_cors_headers, get_client_ip
from . import contact_bp

CONTACT_FIELDS = ('name', 'email', 'subject', 'message')


@contact_bp.route('/api/send-contact-email', methods=['POST', 'OPTIONS'])
def send_contact_email():
    """
    Relay a contact submission to the email API

    OPTIONS answers the CORS preflight without looking at the body.
    POST validates {name, email, subject, message, recipientEmail}, sends the
    owner notification then the submitter confirmation, and answers 200 only
    once both emails are out. Any failure answers 500 with {"error": reason}.
    """
    if request.method == 'OPTIONS':
        return add_cors_headers(make_response('', 200))

    try:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError('body', "Request body must be a JSON object")
        relay_contact(payload, payload.get('recipientEmail'))
    except PortfolioError as e:
        current_app.logger.error(f"Error in send-contact-email from {get_client_ip()}: {e.message}")
        response = make_response(jsonify({'error': e.message or 'Failed to send email'}), 500)
        return add_cors_headers(response)

    response = make_response(jsonify({
        'success': True,
        'message': 'Emails sent successfully'
    }), 200)
    return add_cors_headers(response)


@contact_bp.route('/contact', methods=['POST'])
def contact():
    """Landing page contact form - relays to the configured site owner"""
    payload = {field: request.form.get(field, '') for field in CONTACT_FIELDS}

    try:
        relay_contact(payload, current_app.config.get('CONTACT_RECIPIENT_EMAIL'))
        flash("Message Sent! Thank you for reaching out. I'll get back to you soon.", 'success')
    except ValidationError as e:
        flash(e.message, 'error')
    except RemoteError as e:
        current_app.logger.error(f"Contact form error: {e.message}")
        flash('Failed to send message. Please try again later.', 'error')

    return redirect(url_for('pages.index', _anchor='contact'))

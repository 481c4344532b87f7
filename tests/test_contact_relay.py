from unittest import mock

import pytest
import requests

RELAY_URL = '/api/send-contact-email'


def submission(**overrides):
    payload = {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'subject': 'Collaboration',
        'message': 'Would you like to work on a data story together?',
        'recipientEmail': 'owner@example.com'
    }
    payload.update(overrides)
    return payload


def test_preflight(client, email_api):
    response = client.open(RELAY_URL, method='OPTIONS')

    assert response.status_code == 200
    assert response.data == b''
    assert response.headers['Access-Control-Allow-Origin'] == '*'
    assert 'content-type' in response.headers['Access-Control-Allow-Headers']
    assert email_api.call_count == 0


def test_valid_submission_sends_two_emails_in_order(client, email_api):
    response = client.post(RELAY_URL, json=submission())

    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'message': 'Emails sent successfully'}
    assert response.headers['Access-Control-Allow-Origin'] == '*'

    assert email_api.call_count == 2
    notification = email_api.call_args_list[0].kwargs['json']
    confirmation = email_api.call_args_list[1].kwargs['json']

    assert notification['to'] == ['owner@example.com']
    assert notification['reply_to'] == 'jane@example.com'
    assert notification['subject'] == 'Contact Form: Collaboration'
    assert confirmation['to'] == ['jane@example.com']
    assert confirmation['subject'] == 'Thank you for contacting us!'

    headers = email_api.call_args_list[0].kwargs['headers']
    assert headers['Authorization'] == 'Bearer test-resend-key'


def test_missing_message_sends_nothing(client, email_api):
    payload = submission()
    del payload['message']
    response = client.post(RELAY_URL, json=payload)

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Message is required'}
    assert email_api.call_count == 0


@pytest.mark.parametrize('overrides,error', [
    ({'name': 'a' * 101}, 'Name must be less than 100 characters'),
    ({'email': 'not-an-email'}, 'Invalid email address'),
    ({'recipientEmail': 'nobody'}, 'Recipient email is invalid'),
])
def test_invalid_fields_are_rejected(client, email_api, overrides, error):
    response = client.post(RELAY_URL, json=submission(**overrides))

    assert response.status_code == 500
    assert response.get_json()['error'] == error
    assert email_api.call_count == 0


def test_non_object_body(client, email_api):
    response = client.post(RELAY_URL, data='not json', content_type='text/plain')
    assert response.status_code == 500
    assert 'error' in response.get_json()
    assert email_api.call_count == 0


def test_rejected_notification_stops_the_relay(client, email_api):
    email_api.return_value.ok = False
    email_api.return_value.status_code = 422
    email_api.return_value.text = 'invalid from address'

    response = client.post(RELAY_URL, json=submission())

    assert response.status_code == 500
    assert 'invalid from address' in response.get_json()['error']
    assert email_api.call_count == 1


def test_failed_confirmation_after_notification(client, email_api):
    sent = mock.MagicMock(ok=True, status_code=200)
    sent.json.return_value = {'id': 'email_123'}
    rejected = mock.MagicMock(ok=False, status_code=500, text='mailbox unavailable')
    email_api.side_effect = [sent, rejected]

    response = client.post(RELAY_URL, json=submission())

    assert response.status_code == 500
    body = response.get_json()
    assert 'success' not in body
    assert 'mailbox unavailable' in body['error']
    assert email_api.call_count == 2
    assert email_api.call_args_list[1].kwargs['json']['to'] == ['jane@example.com']


def test_unreadable_success_body(client, email_api):
    email_api.return_value.json.side_effect = ValueError('Expecting value')

    response = client.post(RELAY_URL, json=submission())

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Resend API error: invalid response body'}
    assert response.headers['Access-Control-Allow-Origin'] == '*'
    assert email_api.call_count == 1


def test_transport_failure(client, email_api):
    email_api.side_effect = requests.ConnectionError('connection refused')

    response = client.post(RELAY_URL, json=submission())

    assert response.status_code == 500
    assert 'connection refused' in response.get_json()['error']


def test_missing_api_key(app, client, email_api):
    app.config['RESEND_API_KEY'] = None
    response = client.post(RELAY_URL, json=submission())

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Email service is not configured'}
    assert email_api.call_count == 0


def test_user_text_is_escaped_in_html(client, email_api):
    client.post(RELAY_URL, json=submission(name='<b>Jane</b>', message='<script>alert(1)</script>'))

    html = email_api.call_args_list[0].kwargs['json']['html']
    assert '<script>' not in html
    assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html
    assert '&lt;b&gt;Jane&lt;/b&gt;' in html


def test_contact_form_relays_to_site_owner(client, email_api):
    response = client.post('/contact', data={
        'name': 'Jane Doe', 'email': 'jane@example.com',
        'subject': 'Hi', 'message': 'Hello there'
    }, follow_redirects=True)

    assert response.status_code == 200
    assert b'Message Sent!' in response.data
    assert email_api.call_count == 2
    assert email_api.call_args_list[0].kwargs['json']['to'] == ['owner@example.com']


def test_contact_form_validation_message(client, email_api):
    response = client.post('/contact', data={
        'name': 'Jane Doe', 'email': 'jane@example', 'subject': 'Hi', 'message': 'Hello'
    }, follow_redirects=True)

    assert b'Invalid email address' in response.data
    assert email_api.call_count == 0

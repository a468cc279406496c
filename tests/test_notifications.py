import logging
from collections import namedtuple

import boto3
import pytest
from botocore.stub import ANY, Stubber

from showroom import create_app
from showroom.errors import DeliveryFailed
from showroom.extensions import mail
from showroom.services import MailTransport, NotificationDispatcher, SnsTransport, get_service

TOPIC_ARN = 'arn:aws:sns:eu-central-1:123456789012:showroom-contacts'

FakeContact = namedtuple('FakeContact', ['id', 'name', 'email', 'phone', 'subject', 'message',
                                         'ip_address', 'created_at'])


@pytest.fixture
def contact():
    return FakeContact(1, 'Ali Veli', 'ali@x.com', None, 'Kapı fiyatı ' * 20,
                       'Fiyat bilgisi almak istiyorum', '10.0.0.1', None)


class RecordingTransport:
    configured = True

    def __init__(self, error=None):
        self.sent = []
        self.error = error

    def build(self, contact):
        return {'id': contact.id}

    def send(self, message):
        if self.error:
            raise self.error
        self.sent.append(message)


class BrokenBuild(RecordingTransport):

    def build(self, contact):
        raise KeyError('template variable')


def test_mail_message_contents(ctx, contact):
    transport = MailTransport(mail, 'info@showroom.com.tr', 'noreply@showroom.com.tr')
    message = transport.build(contact)
    assert message.recipients == ['info@showroom.com.tr']
    assert message.sender == 'noreply@showroom.com.tr'
    assert 'Not provided' in message.body
    assert '10.0.0.1' in message.html


def test_mail_transport_needs_recipient_and_sender(ctx, contact):
    assert not MailTransport(mail, None, 'noreply@showroom.com.tr').configured
    assert not MailTransport(mail, 'info@showroom.com.tr', None).configured

    dispatcher = NotificationDispatcher(MailTransport(mail, None, None), background=False)
    with mail.record_messages() as outbox:
        assert dispatcher.notify(contact) is None
    assert outbox == []


def test_default_dispatcher_uses_mail(ctx):
    notifier = get_service('notifier')
    assert isinstance(notifier.transport, MailTransport)
    assert notifier.background is False


def test_foreground_failure_raises_delivery_failed(ctx, contact):
    dispatcher = NotificationDispatcher(RecordingTransport(error=DeliveryFailed('down')),
                                        background=False)
    with pytest.raises(DeliveryFailed):
        dispatcher.notify(contact)

    with pytest.raises(DeliveryFailed):
        NotificationDispatcher(BrokenBuild(), background=False).notify(contact)


def test_background_send_runs_on_worker_thread(ctx, contact):
    transport = RecordingTransport()
    thread = NotificationDispatcher(transport).notify(contact)
    thread.join(timeout=5)
    assert transport.sent == [{'id': 1}]


def test_background_failure_is_logged(ctx, contact, caplog):
    transport = RecordingTransport(error=DeliveryFailed('smtp down'))
    with caplog.at_level(logging.WARNING):
        thread = NotificationDispatcher(transport).notify(contact)
        thread.join(timeout=5)
    assert 'Notification for contact 1 failed' in caplog.text


def sns_client():
    return boto3.client('sns', region_name='eu-central-1', aws_access_key_id='testing',
                        aws_secret_access_key='testing')


def test_sns_publish(ctx, contact):
    client = sns_client()
    transport = SnsTransport(client, TOPIC_ARN)
    message = transport.build(contact)
    assert len(message['Subject']) == 100

    with Stubber(client) as stubber:
        stubber.add_response('publish', {'MessageId': 'message-1'},
                             {'TopicArn': TOPIC_ARN, 'Subject': ANY, 'Message': ANY})
        NotificationDispatcher(transport, background=False).notify(contact)
        stubber.assert_no_pending_responses()


def test_sns_error_becomes_delivery_failed(ctx, contact):
    client = sns_client()
    transport = SnsTransport(client, TOPIC_ARN)
    with Stubber(client) as stubber:
        stubber.add_client_error('publish', service_error_code='NotFound',
                                 service_message='Topic does not exist', http_status_code=404)
        with pytest.raises(DeliveryFailed):
            NotificationDispatcher(transport, background=False).notify(contact)


def test_sns_backend_is_selected_from_config():
    app = create_app('testing', NOTIFY_BACKEND='sns', SNS_TOPIC_ARN=TOPIC_ARN,
                     AWS_REGION='eu-central-1')
    with app.app_context():
        transport = get_service('notifier').transport
        assert isinstance(transport, SnsTransport)
        assert transport.topic_arn == TOPIC_ARN


def test_unknown_backend_is_a_config_error():
    with pytest.raises(ValueError):
        create_app('testing', NOTIFY_BACKEND='pigeon')


def test_header_injection_becomes_delivery_failed(ctx, contact):
    transport = MailTransport(mail, 'info@showroom.com.tr', 'noreply@showroom.com.tr')
    message = transport.build(contact._replace(subject='Teklif\nBcc: x@y.com'))
    with pytest.raises(DeliveryFailed):
        transport.send(message)


def test_unexpected_background_error_is_logged(ctx, contact, caplog):
    transport = RecordingTransport(error=RuntimeError('unexpected'))
    with caplog.at_level(logging.WARNING):
        thread = NotificationDispatcher(transport).notify(contact)
        thread.join(timeout=5)
    assert 'Notification for contact 1 failed: unexpected' in caplog.text


def test_worker_thread_that_cannot_start(ctx, contact, monkeypatch):
    class NoThreads:
        def __init__(self, *args, **kwargs):
            pass

        def start(self):
            raise RuntimeError("can't start new thread")

    monkeypatch.setattr('showroom.services.notifications.Thread', NoThreads)
    transport = RecordingTransport()
    with pytest.raises(DeliveryFailed):
        NotificationDispatcher(transport).notify(contact)
    assert transport.sent == []

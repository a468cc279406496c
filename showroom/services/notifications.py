"""Best-effort notification of the site owner when a contact arrives."""

import smtplib
from threading import Thread

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app, render_template
from flask_mail import BadHeaderError, Message

from showroom.errors import DeliveryFailed


class MailTransport:
    """Sends the rendered notification through Flask-Mail."""

    def __init__(self, mail, recipient, sender=None):
        self.mail = mail
        self.recipient = recipient
        self.sender = sender

    @property
    def configured(self):
        return bool(self.recipient and self.sender)

    def build(self, contact):
        return Message(
            subject=f'New contact message: {contact.subject}',
            recipients=[self.recipient],
            sender=self.sender,
            body=render_template('email/new_contact.txt', contact=contact),
            html=render_template('email/new_contact.html', contact=contact)
        )

    def send(self, message):
        try:
            self.mail.send(message)
        except (smtplib.SMTPException, OSError, BadHeaderError) as exc:
            raise DeliveryFailed(f'Mail delivery failed: {exc}') from exc


class SnsTransport:
    """Publishes the notification to an SNS topic."""

    def __init__(self, client, topic_arn):
        self.client = client
        self.topic_arn = topic_arn

    @classmethod
    def from_region(cls, region, topic_arn):
        return cls(boto3.client('sns', region_name=region), topic_arn)

    @property
    def configured(self):
        return bool(self.topic_arn)

    def build(self, contact):
        return {
            'TopicArn': self.topic_arn,
            # SNS subjects are limited to 100 characters
            'Subject': f'New contact message: {contact.subject}'[:100],
            'Message': render_template('email/new_contact.txt', contact=contact),
        }

    def send(self, message):
        try:
            self.client.publish(**message)
        except (ClientError, BotoCoreError) as exc:
            raise DeliveryFailed(f'SNS publish failed: {exc}') from exc


class NotificationDispatcher:
    """Single delivery attempt per contact; no retry, no queue.

    In the foreground ``notify`` raises DeliveryFailed on a transport error.
    In the background the message is built in the request, sent on a worker
    thread, and a failure there is only logged.
    """

    def __init__(self, transport, background=True):
        self.transport = transport
        self.background = background

    def notify(self, contact):
        if not self.transport.configured:
            current_app.logger.debug('No notification target configured, skipping contact %s', contact.id)
            return None

        try:
            message = self.transport.build(contact)
            if not self.background:
                self.transport.send(message)
                return None
            app = current_app._get_current_object()
            thread = Thread(target=self._send_async, args=(app, message, contact.id), daemon=True)
            thread.start()
        except DeliveryFailed:
            raise
        except Exception as exc:
            raise DeliveryFailed(f'Notification could not be sent: {exc}') from exc
        return thread

    def _send_async(self, app, message, contact_id):
        with app.app_context():
            try:
                self.transport.send(message)
            except Exception as exc:
                app.logger.warning('Notification for contact %s failed: %s', contact_id, exc)


def build_dispatcher(app, mail):
    """Pick the transport named by NOTIFY_BACKEND."""
    backend = app.config.get('NOTIFY_BACKEND', 'mail')
    if backend == 'sns':
        transport = SnsTransport.from_region(app.config['AWS_REGION'], app.config.get('SNS_TOPIC_ARN'))
    elif backend == 'mail':
        transport = MailTransport(mail, app.config.get('ADMIN_EMAIL'), app.config.get('MAIL_DEFAULT_SENDER'))
    else:
        raise ValueError(f'Unknown NOTIFY_BACKEND: {backend}')
    return NotificationDispatcher(transport, background=app.config.get('NOTIFY_IN_BACKGROUND', True))

from .errors import PayloadError, PayloadTooLargeError
from .payload import (Payload, NotificationBody, LocalizedAlert, notification,
                      action_notification, silent_notification)

__all__ = ['Payload', 'NotificationBody', 'LocalizedAlert', 'notification',
           'action_notification', 'silent_notification', 'PayloadError',
           'PayloadTooLargeError']

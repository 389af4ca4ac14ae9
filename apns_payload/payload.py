import json
import logging
from collections import OrderedDict
from typing import NamedTuple, Optional, Sequence, Union

from .errors import PayloadTooLargeError

logger = logging.getLogger(__name__)

CONTENT_AVAILABLE = 1

_JSON_SEPARATORS = (",", ":")


def _as_tuple(args: Optional[Sequence[str]]):
    if args is None:
        return None
    return tuple(args)


def _as_list(args):
    if args is None:
        return None
    return list(args)


def _as_str(value):
    if value is None:
        return None
    return str(value)


class _LocalizedAlertFields(NamedTuple):
    title: str
    body: str
    title_loc_key: Optional[str] = None
    title_loc_args: Optional[Sequence[str]] = None
    action_loc_key: Optional[str] = None
    loc_key: Optional[str] = None
    loc_args: Optional[Sequence[str]] = None
    launch_image: Optional[str] = None


class LocalizedAlert(_LocalizedAlertFields):
    """
    Child properties of the ``alert`` dictionary.

    Unlike the ``aps`` dictionary, unset localization keys are sent
    as explicit ``null`` values; only ``launch-image`` is left out.
    Argument lists are copied into tuples.
    """
    __slots__ = ()

    def __new__(cls, title: str, body: str,
                title_loc_key: Optional[str] = None,
                title_loc_args: Optional[Sequence[str]] = None,
                action_loc_key: Optional[str] = None,
                loc_key: Optional[str] = None,
                loc_args: Optional[Sequence[str]] = None,
                launch_image: Optional[str] = None):
        return super().__new__(cls, title, body, title_loc_key,
                               _as_tuple(title_loc_args), action_loc_key,
                               loc_key, _as_tuple(loc_args), launch_image)

    def as_dict(self):
        result = OrderedDict()
        result['title'] = self.title
        result['body'] = self.body
        result['title-loc-key'] = self.title_loc_key
        result['title-loc-args'] = _as_list(self.title_loc_args)
        result['action-loc-key'] = self.action_loc_key
        result['loc-key'] = self.loc_key
        result['loc-args'] = _as_list(self.loc_args)
        if self.launch_image is not None:
            result['launch-image'] = self.launch_image
        return result


Alert = Union[str, LocalizedAlert]


class NotificationBody(NamedTuple):
    alert: Optional[Alert] = None
    badge: Optional[int] = None
    sound: Optional[str] = None
    content_available: Optional[int] = None
    category: Optional[str] = None

    def as_dict(self):
        result = OrderedDict()
        if self.alert is not None:
            if isinstance(self.alert, LocalizedAlert):
                alert = self.alert.as_dict()
            else:
                alert = self.alert
            result['alert'] = alert
        if self.badge is not None:
            result['badge'] = self.badge
        if self.sound is not None:
            result['sound'] = self.sound
        if self.content_available is not None:
            result['content-available'] = self.content_available
        if self.category is not None:
            result['category'] = self.category
        return result


class Payload(NamedTuple):
    """
    Remote notification payload. Build it with :func:`notification`,
    :func:`action_notification` or :func:`silent_notification`.
    """
    aps: NotificationBody

    def as_dict(self):
        return OrderedDict(aps=self.aps.as_dict())

    def to_json(self) -> str:
        return json.dumps(self.as_dict(), separators=_JSON_SEPARATORS,
                          ensure_ascii=False)

    def encode(self) -> bytes:
        return self.to_json().encode("utf-8")

    def byte_length(self) -> int:
        """
        Size of the encoded payload in bytes. ``len(payload)`` is the
        tuple length, not the payload size.
        """
        return len(self.encode())

    def ensure_fits(self, limit: int) -> int:
        length = self.byte_length()
        if length > limit:
            logger.debug("Payload of %d bytes exceeds limit of %d bytes",
                         length, limit)
            raise PayloadTooLargeError(length, limit)
        return length

    def __str__(self):
        return self.to_json()


def notification(alert: Alert, badge: int, sound,
                 category=None) -> Payload:
    return Payload(NotificationBody(alert=alert, badge=badge,
                                    sound=str(sound),
                                    category=_as_str(category)))


def action_notification(alert: Alert, badge: Optional[int],
                        sound, category) -> Payload:
    """
    Notification with actions: the category is required so the device
    can look up the registered actions.
    """
    return Payload(NotificationBody(alert=alert, badge=badge,
                                    sound=str(sound), category=str(category)))


def silent_notification() -> Payload:
    # background update, nothing is shown to the user
    return Payload(NotificationBody(content_available=CONTENT_AVAILABLE))


__all__ = ["LocalizedAlert", "NotificationBody", "Payload", "notification",
           "action_notification", "silent_notification"]

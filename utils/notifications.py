import threading
from collections import namedtuple

import click
from flask import flash

NOTIFICATION_COLORS = {
    'success': '#27ae60',
    'error': '#e74c3c',
    'info': '#3498db',
}

CONSOLE_COLORS = {
    'success': 'green',
    'error': 'red',
    'info': 'blue',
}

Notification = namedtuple('Notification', ['message', 'category'])


def toast_color(category):
    return NOTIFICATION_COLORS.get(category, NOTIFICATION_COLORS['info'])


class Notifier:
    """Collects the toasts raised while one view is being rebuilt.

    Loaders may run on worker threads, so nothing here touches the request
    session directly; `flash_all` hands the messages to Flask at the end.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.messages = []

    def __call__(self, message, category='info'):
        with self._lock:
            self.messages.append(Notification(str(message), category))

    def flash_all(self):
        with self._lock:
            pending, self.messages = self.messages, []
        for note in pending:
            flash(note.message, note.category)
        return pending

    def as_dicts(self):
        with self._lock:
            return [
                {'message': n.message, 'category': n.category, 'color': toast_color(n.category)}
                for n in self.messages
            ]


class ConsoleNotifier(Notifier):
    """Same notifications, printed straight to the terminal."""

    def __call__(self, message, category='info'):
        super().__call__(message, category)
        click.secho(str(message), fg=CONSOLE_COLORS.get(category, 'blue'),
                    err=(category == 'error'))

import json
import logging
import os

from flask import session
from flask_login import login_user, logout_user

from models.user import SessionUser

logger = logging.getLogger(__name__)


class CookieSessionStore:
    """Keeps the last logged-in user in the signed Flask session cookie."""

    def __init__(self, key='userInfo'):
        self.key = key

    def save(self, user):
        session[self.key] = user
        login_user(SessionUser(user))

    def load(self):
        return session.get(self.key)

    def clear(self):
        session.pop(self.key, None)
        logout_user()


class FileSessionStore:
    """Console counterpart: the user object lives in a small JSON file."""

    def __init__(self, path):
        self.path = path

    def save(self, user):
        os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as fh:
            json.dump(user, fh)

    def load(self):
        try:
            with open(self.path, encoding='utf-8') as fh:
                return json.load(fh)
        except FileNotFoundError:
            return None
        except ValueError:
            logger.warning('Ignoring unreadable session file %s', self.path)
            return None

    def clear(self):
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass

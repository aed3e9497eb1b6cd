from flask_login import UserMixin


class SessionUser(UserMixin):
    """The user object the backend returned at login.

    Only drives what the header shows; it is never sent back to the backend.
    """

    def __init__(self, info):
        self.info = dict(info) if isinstance(info, dict) else {}
        self.username = self.info.get('username')

    def get_id(self):
        return str(self.username or self.info.get('id') or '')

    @property
    def greeting(self):
        return f'Welcome, {self.username}'

    def __repr__(self):
        return f'<SessionUser {self.username}>'

import click


class CredentialPrompt:
    """Where login and sign-up details come from.

    Implementations return None when the user leaves a field empty, in which
    case nothing is sent to the backend.
    """

    def login_credentials(self):
        raise NotImplementedError

    def registration_details(self):
        raise NotImplementedError


def _all_filled(values):
    return values if all(values.values()) else None


class FormCredentialPrompt(CredentialPrompt):
    """Reads the login/register modal forms."""

    def __init__(self, form):
        self.form = form

    def _get(self, field):
        return (self.form.get(field) or '').strip()

    def login_credentials(self):
        return _all_filled({
            'username': self._get('username'),
            'password': self.form.get('password') or '',
        })

    def registration_details(self):
        return _all_filled({
            'username': self._get('username'),
            'email': self._get('email'),
            'password': self.form.get('password') or '',
        })


class ConsoleCredentialPrompt(CredentialPrompt):
    """Asks one question at a time and stops at the first blank answer."""

    def _ask(self, text, hide_input=False):
        return click.prompt(text, default='', show_default=False, hide_input=hide_input).strip()

    def _collect(self, questions):
        values = {}
        for field, text, hidden in questions:
            answer = self._ask(text, hide_input=hidden)
            if not answer:
                return None
            values[field] = answer
        return values

    def login_credentials(self):
        return self._collect([
            ('username', 'Enter username', False),
            ('password', 'Enter password', True),
        ])

    def registration_details(self):
        return self._collect([
            ('username', 'Choose a username', False),
            ('email', 'Enter email', False),
            ('password', 'Choose a password', True),
        ])

"""Console fallback for the login/register buttons: `flask hostel ...`."""
import os

import click
from flask import current_app
from flask.cli import AppGroup

from controller import ViewController
from utils.api_client import ApiClient
from utils.credentials import ConsoleCredentialPrompt
from utils.notifications import ConsoleNotifier
from utils.session_store import FileSessionStore

hostel_cli = AppGroup('hostel', help='Log in to the hostel backend from the terminal.')


def _console_controller():
    http = current_app.extensions['hostel_http']
    return ViewController(ApiClient(http, ConsoleNotifier()))


def _file_store():
    return FileSessionStore(os.path.join(current_app.instance_path, current_app.config['SESSION_FILE']))


@hostel_cli.command('login')
def login_command():
    """Prompt for credentials and remember the returned user."""
    user = _console_controller().login(ConsoleCredentialPrompt(), _file_store())
    if user is None:
        raise SystemExit(1)
    click.echo(f"Welcome, {user.get('username')}")


@hostel_cli.command('register')
def register_command():
    """Prompt for a new account and create it on the backend."""
    if not _console_controller().register_account(ConsoleCredentialPrompt()):
        raise SystemExit(1)


@hostel_cli.command('logout')
def logout_command():
    _console_controller().logout(_file_store())


@hostel_cli.command('whoami')
def whoami_command():
    user = _file_store().load()
    if not user:
        click.echo('Not logged in')
        return
    click.echo(f"Welcome, {user.get('username')}")

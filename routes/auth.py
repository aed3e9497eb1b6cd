from flask import Blueprint, current_app, redirect, request, url_for

from controller import SECTIONS, get_controller
from utils.credentials import FormCredentialPrompt
from utils.notifications import Notifier
from utils.session_store import CookieSessionStore

auth_bp = Blueprint('auth', __name__)


def _back_to_section():
    name = request.values.get('next_section')
    if name in SECTIONS and name != 'dashboard':
        return redirect(url_for('main.section', name=name))
    return redirect(url_for('main.index'))


def _session_store():
    return CookieSessionStore(current_app.config['SESSION_USER_KEY'])


@auth_bp.route('/login', methods=['POST'])
def login():
    notifier = Notifier()
    controller = get_controller(notifier)
    controller.login(FormCredentialPrompt(request.form), _session_store())
    notifier.flash_all()
    return _back_to_section()


@auth_bp.route('/register', methods=['POST'])
def register():
    notifier = Notifier()
    controller = get_controller(notifier)
    controller.register_account(FormCredentialPrompt(request.form))
    notifier.flash_all()
    return _back_to_section()


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    notifier = Notifier()
    controller = get_controller(notifier)
    controller.logout(_session_store())
    notifier.flash_all()
    return _back_to_section()

from flask import Blueprint, abort, jsonify, request

from controller import UnknownSection, get_controller, render_view, restore_forms
from utils.notifications import Notifier

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    notifier = Notifier()
    controller = get_controller(notifier)
    controller.initial_load()
    return render_view(controller, notifier, request)


@main_bp.route('/section/<name>')
def section(name):
    notifier = Notifier()
    controller = get_controller(notifier)
    try:
        controller.show_section(name)
    except UnknownSection:
        abort(404)
    restore_forms(controller)
    return render_view(controller, notifier, request)


@main_bp.route('/chatbot', methods=['POST'])
def chatbot():
    data = request.get_json(silent=True) or {}
    notifier = Notifier()
    controller = get_controller(notifier)
    messages = controller.send_chat_message(data.get('message'))
    return jsonify({
        'messages': [m.to_dict() for m in messages],
        'notifications': notifier.as_dicts(),
    })

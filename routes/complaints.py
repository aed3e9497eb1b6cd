from flask import Blueprint, request

from controller import get_controller, redirect_view, wants_json
from utils.notifications import Notifier

complaints_bp = Blueprint('complaints', __name__)


@complaints_bp.route('', methods=['POST'])
def submit_complaint():
    notifier = Notifier()
    controller = get_controller(notifier, 'complaints')
    if not controller.submit_complaint(request.form) and wants_json(request):
        controller.load_complaints()
    return redirect_view(controller, notifier, request)


@complaints_bp.route('/<complaint_id>/resolve', methods=['POST'])
def resolve_complaint(complaint_id):
    notifier = Notifier()
    controller = get_controller(notifier, 'complaints')
    if not controller.resolve_complaint(complaint_id) and wants_json(request):
        controller.load_complaints()
    return redirect_view(controller, notifier, request)

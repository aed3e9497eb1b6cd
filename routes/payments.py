from flask import Blueprint, request

from controller import get_controller, redirect_view, wants_json
from utils.notifications import Notifier

payments_bp = Blueprint('payments', __name__)


@payments_bp.route('', methods=['POST'])
def record_payment():
    notifier = Notifier()
    controller = get_controller(notifier, 'payments')
    if not controller.record_payment(request.form) and wants_json(request):
        controller.load_payments()
    return redirect_view(controller, notifier, request)

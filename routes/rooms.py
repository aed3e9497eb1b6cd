from flask import Blueprint, request

from controller import get_controller, redirect_view, wants_json
from utils.notifications import Notifier

rooms_bp = Blueprint('rooms', __name__)


@rooms_bp.route('/<room_no>/allocate', methods=['POST'])
def allocate_room(room_no):
    notifier = Notifier()
    controller = get_controller(notifier, 'rooms')
    if not controller.allocate_room(room_no, request.form.get('student_id')) and wants_json(request):
        controller.load_rooms()
    return redirect_view(controller, notifier, request)


@rooms_bp.route('/<room_no>/vacate', methods=['POST'])
def vacate_room(room_no):
    notifier = Notifier()
    controller = get_controller(notifier, 'rooms')
    if not controller.vacate_room(room_no) and wants_json(request):
        controller.load_rooms()
    return redirect_view(controller, notifier, request)

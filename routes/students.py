from flask import Blueprint, request

from controller import get_controller, redirect_view, wants_json
from utils.notifications import Notifier

students_bp = Blueprint('students', __name__)


@students_bp.route('', methods=['POST'])
def register_student():
    notifier = Notifier()
    controller = get_controller(notifier, 'students')
    if not controller.register_student(request.form) and wants_json(request):
        controller.load_students()
    return redirect_view(controller, notifier, request)


@students_bp.route('/<student_id>/edit', methods=['POST'])
def edit_student(student_id):
    notifier = Notifier()
    controller = get_controller(notifier, 'students')
    if not controller.edit_student(student_id, request.form) and wants_json(request):
        controller.load_students()
    return redirect_view(controller, notifier, request)


@students_bp.route('/<student_id>/delete', methods=['POST'])
def delete_student(student_id):
    notifier = Notifier()
    controller = get_controller(notifier, 'students')
    if not controller.delete_student(student_id) and wants_json(request):
        controller.load_students()
    return redirect_view(controller, notifier, request)

"""View controller for the hostel portal.

Every screen is rebuilt from the latest backend response: loaders fetch one
collection and publish a rendered fragment under the element id the page
template expects, mutations call the backend and then re-run the loaders
whose panels they affect.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import NamedTuple, Tuple

from flask import current_app, jsonify, redirect, render_template, session, url_for
from markupsafe import Markup

from models.activity import Activity
from models.complaint import Complaint, PENDING
from models.payment import Payment
from models.room import Room, AVAILABLE
from models.student import Student
from utils.api_client import ApiClient

logger = logging.getLogger(__name__)

FORM_VALUES_KEY = 'form_values'

CHATBOT_APOLOGY = ('I apologize, but I am currently unable to process your request. '
                   'Please try again later.')


class UnknownSection(KeyError):
    pass


class Section(NamedTuple):
    name: str
    panel_id: str
    reloads: Tuple[str, ...]


SECTIONS = {
    'dashboard': Section('dashboard', 'dashboard', ('load_dashboard',)),
    'students': Section('students', 'students', ('load_students',)),
    'rooms': Section('rooms', 'rooms', ('load_rooms',)),
    'payments': Section('payments', 'payments', ('load_students_for_selection', 'load_payments')),
    'complaints': Section('complaints', 'complaints', ('load_students_for_selection', 'load_complaints')),
}

COUNTER_IDS = ('totalStudents', 'totalRooms', 'availableRooms', 'pendingComplaints')


class ChatMessage(NamedTuple):
    content: str
    sender: str

    def to_dict(self):
        return {'content': self.content, 'sender': self.sender}


class ViewState:
    """Everything one render pass produces."""

    def __init__(self, active_section='dashboard'):
        self.active_section = active_section
        self.panels = {}
        self.counters = {}
        self.forms = {}

    @property
    def section(self):
        return SECTIONS[self.active_section]

    def panel(self, element_id):
        return self.panels.get(element_id, Markup(''))

    def form_value(self, form_id, field):
        return self.forms.get(form_id, {}).get(field, '')

    def to_dict(self):
        return {
            'active_section': self.active_section,
            'active_panel': self.section.panel_id,
            'panels': {key: str(value) for key, value in self.panels.items()},
            'counters': dict(self.counters),
        }


class LoadTracker:
    """Hands out a generation number per view key.

    Only the newest load for a key may publish, so a slow response can never
    overwrite a fresher one. The fence only covers loads issued through one
    controller; every HTTP request builds its own, so two browser requests
    never share generations.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generations = {}

    def begin(self, key):
        with self._lock:
            generation = self._generations.get(key, 0) + 1
            self._generations[key] = generation
            return generation

    def is_current(self, key, generation):
        with self._lock:
            return self._generations.get(key) == generation


def _pick(summary, *keys):
    for key in keys:
        value = summary.get(key)
        if value:
            return value
    return 0


def _as_list(result):
    if result and isinstance(result.data, list):
        return result.data
    return []


class ViewController:
    def __init__(self, api: ApiClient, state: ViewState = None):
        self.api = api
        self.notify = api.notifier
        self.state = state or ViewState()
        self.tracker = LoadTracker()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def show_section(self, name):
        section = SECTIONS.get(name)
        if section is None:
            raise UnknownSection(name)
        self.state.active_section = section.name
        for loader in section.reloads:
            getattr(self, loader)()
        return self.state

    def initial_load(self):
        self.load_dashboard()
        self.load_rooms_for_selection()
        self.load_students_for_selection()
        return self.state

    def complete_page(self):
        """Fill the form dropdowns a full page needs but the section did not load."""
        if 'studentRoom' not in self.state.panels:
            self.load_rooms_for_selection()
        if 'paymentStudent' not in self.state.panels:
            self.load_students_for_selection()
        return self.state

    def _publish(self, key, generation, element_id, html):
        if not self.tracker.is_current(key, generation):
            logger.debug('Dropping stale %s render', key)
            return False
        self.state.panels[element_id] = Markup(html)
        return True

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------
    def load_dashboard(self):
        generation = self.tracker.begin('dashboard')
        counters = {}

        summary = self.api.call('/dashboard')
        if summary:
            data = summary.data if isinstance(summary.data, dict) else {}
            counters['totalStudents'] = _pick(data, 'totalStudents', 'total_students')
            counters['totalRooms'] = _pick(data, 'totalRooms', 'total_rooms')
            counters['availableRooms'] = _pick(data, 'availableRooms', 'available_rooms')
            counters['pendingComplaints'] = _pick(data, 'pendingComplaints', 'pending_complaints')
            if self.tracker.is_current('dashboard', generation):
                self.state.counters.update(counters)

        # The raw collections win over the aggregate endpoint.
        with ThreadPoolExecutor(max_workers=3) as pool:
            futures = [pool.submit(self.api.call, endpoint)
                       for endpoint in ('/students', '/rooms', '/complaints')]
            students, rooms, complaints = [f.result() for f in futures]

        if students:
            counters['totalStudents'] = len(_as_list(students))
        if rooms:
            room_list = _as_list(rooms)
            counters['totalRooms'] = len(room_list)
            counters['availableRooms'] = sum(
                1 for r in room_list if isinstance(r, dict) and r.get('availability') == AVAILABLE)
        if complaints:
            counters['pendingComplaints'] = sum(
                1 for c in _as_list(complaints) if isinstance(c, dict) and c.get('status') == PENDING)

        if self.tracker.is_current('dashboard', generation):
            self.state.counters.update(counters)

        self.load_recent_activities()
        return self.state.counters

    def load_recent_activities(self):
        generation = self.tracker.begin('activities')
        activities = [Activity(r) for r in _as_list(self.api.call('/activities'))]
        html = render_template('partials/activities.html', activities=activities)
        return self._publish('activities', generation, 'activityList', html)

    # ------------------------------------------------------------------
    # Students
    # ------------------------------------------------------------------
    def load_students(self):
        generation = self.tracker.begin('students')
        students = [Student(r) for r in _as_list(self.api.call('/students'))]
        html = render_template('partials/students_rows.html', students=students)
        return self._publish('students', generation, 'studentsTable', html)

    def load_students_for_selection(self):
        generation = self.tracker.begin('student-options')
        students = [Student(r) for r in _as_list(self.api.call('/students'))]
        html = render_template('partials/student_options.html', students=students)
        published = self._publish('student-options', generation, 'paymentStudent', html)
        if published:
            self.state.panels['complaintStudent'] = Markup(html)
        return published

    def register_student(self, form):
        result = self.api.call('/students', method='POST', json=Student.payload_from_form(form))
        if not result:
            self.state.forms['studentForm'] = dict(form)
            return False
        self.notify('Student registered successfully!', 'success')
        self.load_students()
        self.load_dashboard()
        self.load_rooms_for_selection()
        return True

    def edit_student(self, student_id, form):
        changes = Student.changes_from_form(form)
        if not changes:
            return False
        result = self.api.call(f'/students/{student_id}', method='PUT', json=changes)
        if not result:
            return False
        self.notify('Student updated successfully', 'success')
        self._refresh_after_student_change()
        return True

    def delete_student(self, student_id):
        result = self.api.call(f'/students/{student_id}', method='DELETE')
        if not result:
            return False
        self.notify('Student deleted successfully', 'success')
        self._refresh_after_student_change()
        return True

    def _refresh_after_student_change(self):
        self.load_students()
        self.load_rooms()
        self.load_rooms_for_selection()
        self.load_dashboard()

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------
    def load_rooms(self):
        generation = self.tracker.begin('rooms')
        rooms = [Room(r) for r in _as_list(self.api.call('/rooms'))]
        html = render_template('partials/rooms_rows.html', rooms=rooms)
        return self._publish('rooms', generation, 'roomsTable', html)

    def load_rooms_for_selection(self):
        generation = self.tracker.begin('room-options')
        rooms = [Room(r) for r in _as_list(self.api.call('/rooms/available'))]
        html = render_template('partials/room_options.html', rooms=rooms)
        return self._publish('room-options', generation, 'studentRoom', html)

    def allocate_room(self, room_no, student_id):
        student_id = (student_id or '').strip()
        if not student_id:
            return False
        result = self.api.call('/rooms/allocate', method='POST',
                               json={'student_id': student_id, 'room_no': room_no})
        if not result:
            return False
        self.notify(f'Room {room_no} allocated to {student_id}', 'success')
        self._refresh_after_room_change()
        return True

    def vacate_room(self, room_no):
        result = self.api.call('/rooms/vacate', method='POST', json={'room_no': room_no})
        if not result:
            return False
        self.notify(f'Room {room_no} vacated', 'success')
        self._refresh_after_room_change()
        return True

    def _refresh_after_room_change(self):
        self.load_rooms()
        self.load_rooms_for_selection()
        self.load_students()
        self.load_dashboard()

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------
    def load_payments(self):
        generation = self.tracker.begin('payments')
        payments = [Payment(r) for r in _as_list(self.api.call('/payments'))]
        html = render_template('partials/payments_rows.html', payments=payments)
        return self._publish('payments', generation, 'paymentsTable', html)

    def record_payment(self, form):
        result = self.api.call('/payments', method='POST', json=Payment.payload_from_form(form))
        if not result:
            self.state.forms['paymentForm'] = dict(form)
            return False
        self.notify('Payment recorded successfully!', 'success')
        self.load_payments()
        self.load_dashboard()
        return True

    # ------------------------------------------------------------------
    # Complaints
    # ------------------------------------------------------------------
    def load_complaints(self):
        generation = self.tracker.begin('complaints')
        complaints = [Complaint(r) for r in _as_list(self.api.call('/complaints'))]
        html = render_template('partials/complaints_rows.html', complaints=complaints)
        return self._publish('complaints', generation, 'complaintsTable', html)

    def submit_complaint(self, form):
        result = self.api.call('/complaints', method='POST', json=Complaint.payload_from_form(form))
        if not result:
            self.state.forms['complaintForm'] = dict(form)
            return False
        self.notify('Complaint submitted successfully!', 'success')
        self.load_complaints()
        self.load_dashboard()
        return True

    def resolve_complaint(self, complaint_id):
        result = self.api.call(f'/complaints/{complaint_id}/resolve', method='POST')
        if not result:
            return False
        self.notify('Complaint marked as resolved', 'success')
        self.load_complaints()
        self.load_dashboard()
        return True

    # ------------------------------------------------------------------
    # Chatbot
    # ------------------------------------------------------------------
    def send_chat_message(self, text):
        message = (text or '').strip()
        if not message:
            return []
        messages = [ChatMessage(message, 'user')]
        response = self.api.call('/chatbot', method='POST', json={'message': message})
        reply = response.get('reply') if response else None
        messages.append(ChatMessage(reply if reply is not None else CHATBOT_APOLOGY, 'bot'))
        return messages

    # ------------------------------------------------------------------
    # Session display
    # ------------------------------------------------------------------
    def login(self, prompt, store):
        credentials = prompt.login_credentials()
        if credentials is None:
            return None
        result = self.api.call('/login', method='POST', json=credentials)
        logger.info('Login response for %s: %r', credentials['username'], result)
        if result and (result.get('success') or result.get('user')):
            user = result.get('user')
            if not isinstance(user, dict):
                user = {'username': credentials['username']}
            store.save(user)
            self.notify(result.get('message') or 'Login successful!', 'success')
            return user
        if result and result.get('error'):
            self.notify(result.get('error'), 'error')
        return None

    def register_account(self, prompt):
        details = prompt.registration_details()
        if details is None:
            return False
        result = self.api.call('/register', method='POST', json=details)
        logger.info('Register response for %s: %r', details['username'], result)
        if result and (result.get('success') or result.get('message')):
            self.notify(result.get('message') or 'Registration successful! Please login.', 'success')
            return True
        if result and result.get('error'):
            self.notify(result.get('error'), 'error')
        return False

    def logout(self, store):
        store.clear()
        self.notify('Logged out successfully!', 'success')


def get_controller(notifier, section='dashboard'):
    """Build a controller for the current request on the shared HTTP client."""
    http = current_app.extensions['hostel_http']
    return ViewController(ApiClient(http, notifier), ViewState(section))


def wants_json(request):
    best = request.accept_mimetypes.best_match(['text/html', 'application/json'])
    return request.is_json or best == 'application/json'


def render_view(controller, notifier, request, status=200):
    """Full page for browsers, the bare view state for script clients."""
    if wants_json(request):
        payload = controller.state.to_dict()
        payload['notifications'] = notifier.as_dicts()
        return jsonify(payload), status
    controller.complete_page()
    notifier.flash_all()
    return render_template('index.html', view=controller.state, sections=SECTIONS), status


def redirect_view(controller, notifier, request):
    """Answer a form post: redirect browsers back to the section, JSON for scripts.

    Rejected form input is parked in the session for the next page view.
    """
    if wants_json(request):
        return render_view(controller, notifier, request)
    notifier.flash_all()
    if controller.state.forms:
        session[FORM_VALUES_KEY] = controller.state.forms
    return redirect(url_for('main.section', name=controller.state.active_section))


def restore_forms(controller):
    """Refill forms rejected by the previous post; read once."""
    forms = session.pop(FORM_VALUES_KEY, None)
    if isinstance(forms, dict):
        controller.state.forms.update(forms)

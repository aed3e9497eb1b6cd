from utils.formatters import parse_int

STUDENT_FIELDS = ('student_id', 'name', 'age', 'gender', 'contact', 'room_no')
EDITABLE_FIELDS = ('name', 'age', 'contact', 'room_no')


class Student:
    """Read-only view of a student record returned by the backend."""

    def __init__(self, record):
        self.record = record or {}
        self.student_id = self.record.get('student_id')
        self.name = self.record.get('name')
        self.age = self.record.get('age')
        self.gender = self.record.get('gender')
        self.contact = self.record.get('contact')
        self.room_no = self.record.get('room_no')

    @property
    def option_label(self):
        return f'{self.student_id} - {self.name}'

    @staticmethod
    def payload_from_form(form):
        payload = {field: form.get(field) for field in STUDENT_FIELDS}
        payload['age'] = parse_int(form.get('age'))
        return payload

    @staticmethod
    def changes_from_form(form):
        """Only the fields the user filled in; blank means keep the current value."""
        changes = {}
        for field in EDITABLE_FIELDS:
            value = (form.get(field) or '').strip()
            if not value:
                continue
            changes[field] = parse_int(value) if field == 'age' else value
        return changes

    def __repr__(self):
        return f'<Student {self.student_id} - {self.name}>'

from utils.formatters import format_date

PENDING = 'Pending'
RESOLVED = 'Resolved'


class Complaint:
    def __init__(self, record):
        self.record = record or {}
        self.complaint_id = self.record.get('complaint_id')
        self.student_id = self.record.get('student_id')
        self.issue_type = self.record.get('issue_type')
        self.description = self.record.get('description')
        self.complaint_date = self.record.get('complaint_date')
        self.status = self.record.get('status')

    @property
    def is_pending(self):
        return self.status == PENDING

    @property
    def status_class(self):
        return 'resolved' if self.status == RESOLVED else 'pending'

    @property
    def date_display(self):
        return format_date(self.complaint_date)

    @staticmethod
    def payload_from_form(form):
        return {
            'student_id': form.get('student_id'),
            'issue_type': form.get('issue_type'),
            'description': form.get('description'),
        }

    def __repr__(self):
        return f'<Complaint {self.complaint_id} - {self.status}>'

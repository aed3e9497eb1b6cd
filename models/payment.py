from utils.formatters import format_date, format_inr, parse_float


class Payment:
    def __init__(self, record):
        self.record = record or {}
        self.payment_id = self.record.get('payment_id')
        self.student_id = self.record.get('student_id')
        self.amount = self.record.get('amount')
        self.payment_type = self.record.get('payment_type')
        self.payment_date = self.record.get('payment_date')

    @property
    def amount_display(self):
        return format_inr(self.amount)

    @property
    def date_display(self):
        return format_date(self.payment_date)

    @staticmethod
    def payload_from_form(form):
        return {
            'student_id': form.get('student_id'),
            'amount': parse_float(form.get('amount')),
            'payment_date': form.get('payment_date'),
            'payment_type': form.get('payment_type'),
        }

    def __repr__(self):
        return f'<Payment {self.payment_id} - {self.amount_display}>'

from utils.formatters import activity_icon, format_date


class Activity:
    """One entry of the dashboard's recent-activity feed."""

    def __init__(self, record):
        self.record = record or {}
        self.type = self.record.get('type')
        self.title = self.record.get('title')
        self.description = self.record.get('description')
        self.date = self.record.get('date')

    @property
    def icon(self):
        return activity_icon(self.type)

    @property
    def date_display(self):
        return format_date(self.date)

    def __repr__(self):
        return f'<Activity {self.type} - {self.title}>'

AVAILABLE = 'Available'


class Room:
    def __init__(self, record):
        self.record = record or {}
        self.room_no = self.record.get('room_no')
        self.type = self.record.get('type')
        self.capacity = self.record.get('capacity')
        self.availability = self.record.get('availability')
        self.occupied_by = self.record.get('occupied_by')

    @property
    def is_available(self):
        return self.availability == AVAILABLE

    @property
    def status_class(self):
        return 'available' if self.is_available else 'occupied'

    @property
    def option_label(self):
        return f'{self.room_no} ({self.type})'

    def __repr__(self):
        return f'<Room {self.room_no} - {self.availability}>'

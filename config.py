import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Hostel backend (JSON over HTTP)
    API_BASE_URL = os.environ.get('API_BASE_URL') or 'http://localhost:5000/api'
    API_TIMEOUT = float(os.environ['API_TIMEOUT']) if os.environ.get('API_TIMEOUT') else None
    API_TRANSPORT = None  # tests swap in an httpx.MockTransport

    # Toasts
    NOTIFICATION_TIMEOUT_MS = int(os.environ.get('NOTIFICATION_TIMEOUT_MS') or 3000)

    # Display-only login state
    SESSION_USER_KEY = 'userInfo'
    SESSION_FILE = 'userInfo.json'

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    API_BASE_URL = 'http://backend.test/api'

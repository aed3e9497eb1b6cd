import json
import logging
from enum import Enum
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = 'Error connecting to server. Please try again.'


class Outcome(Enum):
    OK = 'ok'          # 2xx with a JSON payload
    EMPTY = 'empty'    # 2xx with no body (or a literal null)
    FAILED = 'failed'  # transport error, bad JSON or non-2xx


class ApiResult:
    """Result of one backend call.

    Truthy only for OK, so handlers that just check `if result:` treat an
    empty success and a failure the same way.
    """

    def __init__(self, outcome: Outcome, data: Any = None, status_code: Optional[int] = None):
        self.outcome = outcome
        self.data = data
        self.status_code = status_code

    @classmethod
    def failed(cls, status_code=None):
        return cls(Outcome.FAILED, status_code=status_code)

    @property
    def ok(self):
        return self.outcome is Outcome.OK

    def get(self, key, default=None):
        if isinstance(self.data, dict):
            return self.data.get(key, default)
        return default

    def __bool__(self):
        return self.ok

    def __repr__(self):
        return f'<ApiResult {self.outcome.value} status={self.status_code}>'


def build_http_client(config):
    """Create the shared httpx client from the app config."""
    kwargs = {'base_url': config['API_BASE_URL']}
    if config.get('API_TIMEOUT') is not None:
        kwargs['timeout'] = config['API_TIMEOUT']
    if config.get('API_TRANSPORT') is not None:
        kwargs['transport'] = config['API_TRANSPORT']
    return httpx.Client(**kwargs)


class ApiClient:
    def __init__(self, http: httpx.Client, notifier=None):
        self.http = http
        self.notifier = notifier or (lambda message, category='info': None)

    def call(self, endpoint: str, method: str = 'GET', json: Any = None, headers: Optional[dict] = None) -> ApiResult:
        """Send one JSON request to the backend; never raises."""
        merged_headers = {'Content-Type': 'application/json'}
        merged_headers.update(headers or {})

        try:
            response = self.http.request(method, endpoint, json=json, headers=merged_headers)
        except httpx.HTTPError:
            logger.exception('API call error: %s %s', method, endpoint)
            self.notifier(CONNECTION_ERROR_MESSAGE, 'error')
            return ApiResult.failed()
        except (TypeError, ValueError):
            logger.exception('API call error: could not encode %s %s', method, endpoint)
            self.notifier(CONNECTION_ERROR_MESSAGE, 'error')
            return ApiResult.failed()

        try:
            data = _parse_body(response.text)
        except ValueError:
            if response.is_success:
                logger.error('API call error: unreadable body from %s %s', method, endpoint)
                self.notifier(CONNECTION_ERROR_MESSAGE, 'error')
                return ApiResult.failed(response.status_code)
            data = None

        if not response.is_success:
            message = _error_message(data) or response.reason_phrase or 'Request failed'
            logger.error('API error: %s (endpoint=%s status=%s data=%r)',
                         message, endpoint, response.status_code, data)
            self.notifier(message, 'error')
            return ApiResult.failed(response.status_code)

        if data is None:
            return ApiResult(Outcome.EMPTY, status_code=response.status_code)
        return ApiResult(Outcome.OK, data, response.status_code)


def _parse_body(text):
    if not text or not text.strip():
        return None
    return json.loads(text)


def _error_message(data):
    if isinstance(data, dict):
        return data.get('error') or data.get('message')
    return None

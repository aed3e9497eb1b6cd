import unittest
from unittest import mock

import httpx

from tests.backend import FakeBackend
from utils.api_client import ApiClient, CONNECTION_ERROR_MESSAGE, Outcome


def client_for(backend):
    notifier = mock.Mock()
    http = httpx.Client(base_url='http://backend.test/api', transport=backend.transport())
    return ApiClient(http, notifier), notifier


class ApiClientTests(unittest.TestCase):
    def test_error_body_returns_failed_and_notifies_once(self):
        backend = FakeBackend({('POST', '/students'): (400, {'error': 'Student already exists'})})
        api, notifier = client_for(backend)

        result = api.call('/students', method='POST', json={'student_id': 'S1'})

        self.assertFalse(result)
        self.assertIs(result.outcome, Outcome.FAILED)
        self.assertEqual(result.status_code, 400)
        notifier.assert_called_once()
        message, category = notifier.call_args[0]
        self.assertIn('Student already exists', message)
        self.assertEqual(category, 'error')

    def test_message_field_used_when_no_error_field(self):
        backend = FakeBackend({('GET', '/rooms'): (409, {'message': 'Room busy'})})
        api, notifier = client_for(backend)

        self.assertFalse(api.call('/rooms'))
        notifier.assert_called_once_with('Room busy', 'error')

    def test_reason_phrase_when_body_has_no_message(self):
        backend = FakeBackend({('GET', '/rooms'): (500, None)})
        api, notifier = client_for(backend)

        self.assertFalse(api.call('/rooms'))
        notifier.assert_called_once_with('Internal Server Error', 'error')

    def test_network_failure_returns_failed_with_generic_message(self):
        backend = FakeBackend({('GET', '/students'): httpx.ConnectError('Connection refused')})
        api, notifier = client_for(backend)

        result = api.call('/students')

        self.assertFalse(result)
        self.assertIs(result.outcome, Outcome.FAILED)
        notifier.assert_called_once_with(CONNECTION_ERROR_MESSAGE, 'error')

    def test_unencodable_payload_returns_failed_without_sending(self):
        backend = FakeBackend({('POST', '/payments'): (201, {'payment_id': 1})})
        api, notifier = client_for(backend)

        result = api.call('/payments', method='POST', json={'amount': object()})

        self.assertIs(result.outcome, Outcome.FAILED)
        notifier.assert_called_once_with(CONNECTION_ERROR_MESSAGE, 'error')
        self.assertEqual(backend.requests, [])

    def test_unreadable_success_body_counts_as_failure(self):
        backend = FakeBackend({('GET', '/students'): (200, '<html>oops</html>')})
        api, notifier = client_for(backend)

        self.assertIs(api.call('/students').outcome, Outcome.FAILED)
        notifier.assert_called_once_with(CONNECTION_ERROR_MESSAGE, 'error')

    def test_empty_success_body_is_falsy_but_distinguishable(self):
        backend = FakeBackend({
            ('DELETE', '/students/S1'): (204, None),
            ('POST', '/rooms/vacate'): (200, 'null'),
        })
        api, notifier = client_for(backend)

        deleted = api.call('/students/S1', method='DELETE')
        vacated = api.call('/rooms/vacate', method='POST', json={'room_no': '101'})

        self.assertFalse(deleted)
        self.assertIs(deleted.outcome, Outcome.EMPTY)
        self.assertIs(vacated.outcome, Outcome.EMPTY)
        self.assertIsNone(deleted.data)
        notifier.assert_not_called()

    def test_success_returns_parsed_data(self):
        backend = FakeBackend({('GET', '/students'): (200, [{'student_id': 'S1'}])})
        api, notifier = client_for(backend)

        result = api.call('/students')

        self.assertTrue(result)
        self.assertEqual(result.data, [{'student_id': 'S1'}])
        notifier.assert_not_called()

    def test_empty_list_is_still_a_result(self):
        backend = FakeBackend({('GET', '/students'): (200, [])})
        api, _ = client_for(backend)

        result = api.call('/students')

        self.assertTrue(result)
        self.assertEqual(result.data, [])

    def test_json_content_type_merged_with_caller_headers(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            seen['url'] = str(request.url)
            return httpx.Response(200, json={'ok': True})

        backend = FakeBackend({('GET', '/dashboard'): handler})
        api, _ = client_for(backend)

        api.call('/dashboard', headers={'X-Trace': 'abc'})

        self.assertEqual(seen['content-type'], 'application/json')
        self.assertEqual(seen['x-trace'], 'abc')
        self.assertEqual(seen['url'], 'http://backend.test/api/dashboard')

    def test_caller_header_overrides_default(self):
        seen = {}

        def handler(request):
            seen['type'] = request.headers['content-type']
            return httpx.Response(200, json={})

        backend = FakeBackend({('GET', '/dashboard'): handler})
        api, _ = client_for(backend)

        api.call('/dashboard', headers={'Content-Type': 'text/plain'})

        self.assertEqual(seen['type'], 'text/plain')

    def test_get_reads_dict_payloads_only(self):
        backend = FakeBackend({
            ('POST', '/chatbot'): (200, {'reply': 'Hi'}),
            ('GET', '/rooms'): (200, [1, 2]),
        })
        api, _ = client_for(backend)

        self.assertEqual(api.call('/chatbot', method='POST', json={}).get('reply'), 'Hi')
        self.assertIsNone(api.call('/rooms').get('reply'))


if __name__ == '__main__':
    unittest.main()

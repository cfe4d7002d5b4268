import json

from django.test import SimpleTestCase

from xmlapi.exceptions import DecodeError, OperationError, SerializationError
from xmlapi.models import QName
from xmlapi.transforms import (
    decode_auth_token,
    decode_envelope,
    decode_file_list,
    decode_json,
    decode_node,
    encode_body,
    encode_params,
    envelope_result,
)


class TestEncoding(SimpleTestCase):
    def test_booleans_become_literal_text(self):
        params = encode_params({'overwrite': True, 'other': False})
        self.assertEqual(params, {'overwrite': 'true', 'other': 'false'})

    def test_none_and_numbers(self):
        self.assertEqual(encode_params({'a': None, 'b': 3}), {'a': '', 'b': '3'})

    def test_no_params(self):
        self.assertEqual(encode_params(None), {})

    def test_body_is_json_bytes(self):
        self.assertEqual(json.loads(encode_body({'value': 'ž'})), {'value': 'ž'})
        self.assertIsNone(encode_body(None))

    def test_unserializable_body(self):
        with self.assertRaises(SerializationError):
            encode_body({'when': object()})


class TestEnvelope(SimpleTestCase):
    def test_status_field(self):
        self.assertEqual(decode_envelope({'status': 'created', 'error': ''}).status, 'created')

    def test_data_field(self):
        self.assertEqual(decode_envelope({'data': 'deleted'}).status, 'deleted')

    def test_status_wins_over_data(self):
        self.assertEqual(decode_envelope({'status': 'a', 'data': 'b'}).status, 'a')

    def test_error_raises_operation_error(self):
        with self.assertRaisesRegex(OperationError, "node not found"):
            envelope_result({'status': '', 'error': 'node not found'})

    def test_not_an_object(self):
        with self.assertRaises(DecodeError):
            decode_envelope(['created'])


class TestNodeDecoding(SimpleTestCase):
    def _payload(self):
        return {
            'name': 'config',
            'value': '',
            'nodes': [
                {'name': 'a', 'value': '1', 'nodes': [
                    {'name': 'a1', 'value': 'x', 'nodes': [
                        {'name': 'a1i', 'value': 'deep', 'nodes': []},
                    ]},
                ]},
                {'name': 'b', 'value': '2', 'nodes': []},
                {'name': 'c', 'value': '3'},
            ],
        }

    def test_nesting_and_order_preserved(self):
        node = decode_node(self._payload())
        self.assertEqual([child.tag for child in node.nodes], ['a', 'b', 'c'])
        self.assertEqual(node.nodes[0].nodes[0].nodes[0].value, 'deep')
        self.assertEqual(node.nodes[2].nodes, [])

    def test_namespace_qualified_name(self):
        node = decode_node({
            'XMLName': {'Space': 'urn:example', 'Local': 'device'},
            'value': 'v',
            'nodes': None,
        })
        self.assertEqual(node.name, QName('device', space='urn:example'))
        self.assertEqual(node.nodes, [])

    def test_lowercase_xmlname_key(self):
        node = decode_node({'xmlname': {'space': '', 'local': 'item'}, 'value': 'x'})
        self.assertEqual(node.tag, 'item')

    def test_error_payload(self):
        with self.assertRaisesRegex(OperationError, "path not found"):
            decode_node({'error': 'path not found'})

    def test_missing_name(self):
        with self.assertRaises(DecodeError):
            decode_node({'value': 'x'})

    def test_bad_name(self):
        with self.assertRaises(DecodeError):
            decode_node({'name': 42})


class TestFileListDecoding(SimpleTestCase):
    def test_files_object(self):
        self.assertEqual(decode_file_list({'files': ['a.xml', 'b.xml']}), ['a.xml', 'b.xml'])

    def test_bare_list(self):
        self.assertEqual(decode_file_list(['a.xml']), ['a.xml'])

    def test_envelope_data_list(self):
        self.assertEqual(decode_file_list({'data': ['a.xml'], 'error': ''}), ['a.xml'])

    def test_envelope_data_string(self):
        self.assertEqual(decode_file_list({'data': 'a.xml', 'error': ''}), ['a.xml'])

    def test_envelope_empty_string(self):
        self.assertEqual(decode_file_list({'status': '', 'error': ''}), [])

    def test_null_files(self):
        self.assertEqual(decode_file_list({'files': None}), [])

    def test_error_envelope(self):
        with self.assertRaisesRegex(OperationError, "unknown device"):
            decode_file_list({'files': [], 'error': 'unknown device'})

    def test_wrong_shape(self):
        with self.assertRaises(DecodeError):
            decode_file_list({'files': [1, 2]})


class TestAuthTokenDecoding(SimpleTestCase):
    def test_token_and_expiry(self):
        auth = decode_auth_token({'token': 'abc', 'expires': 3600})
        self.assertEqual(auth.token, 'abc')
        self.assertEqual(auth.expires, '3600')

    def test_missing_token(self):
        self.assertIsNone(decode_auth_token({'expires': 3600}))
        self.assertIsNone(decode_auth_token({'token': ''}))

    def test_invalid_json(self):
        with self.assertRaises(DecodeError):
            decode_json(b'<html>')

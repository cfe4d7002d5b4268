from django.test import SimpleTestCase

from xmlapi.models import Node, QName, RawResponse


def _tree():
    return Node(
        name=QName('config', space='urn:example:device'),
        nodes=[
            Node(name=QName('interface'), value='eth0', nodes=[
                Node(name=QName('mtu'), value='1500'),
            ]),
            Node(name=QName('hostname'), value='router-1'),
        ],
    )


class TestQName(SimpleTestCase):
    def test_plain_name(self):
        self.assertEqual(str(QName('device')), 'device')

    def test_namespaced_name_uses_clark_notation(self):
        self.assertEqual(str(QName('device', space='urn:x')), '{urn:x}device')


class TestNode(SimpleTestCase):
    def test_iter_is_depth_first(self):
        tags = [node.tag for node in _tree().iter()]
        self.assertEqual(tags, ['{urn:example:device}config', 'interface', 'mtu', 'hostname'])

    def test_find_by_local_name(self):
        self.assertEqual(_tree().find('hostname').value, 'router-1')
        self.assertIsNone(_tree().find('missing'))

    def test_to_dict_keeps_namespace(self):
        data = _tree().to_dict()
        self.assertEqual(data['name'], {'space': 'urn:example:device', 'local': 'config'})
        self.assertEqual(data['nodes'][0]['nodes'][0], {'name': 'mtu', 'value': '1500', 'nodes': []})

    def test_str(self):
        self.assertIn("2 children", str(_tree()))


class TestRawResponse(SimpleTestCase):
    def test_ok_and_text(self):
        response = RawResponse(status_code=404, content=b'no such file')
        self.assertFalse(response.ok)
        self.assertEqual(response.text, 'no such file')

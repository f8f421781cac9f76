import json
from unittest import TestCase

from data_vault import END, UUID_AMAZON, field_stream
from pwsafecommander import display
from pwsafecommander.record import assemble_all
from pwsafecommander.record_types import FieldKind
from pwsafecommander.search import resolve


class TestDisplay(TestCase):
    def setUp(self):
        self.records = assemble_all(field_stream())

    def test_secure_projection(self):
        record = self.records[0]
        entry = display.to_secure(record)
        self.assertIsInstance(entry, display.SecureEntry)
        self.assertEqual(entry.uuid, str(UUID_AMAZON))
        self.assertEqual(entry.group, 'web')
        self.assertEqual(entry.title, 'amazon')
        self.assertEqual(entry.username, 'alice')
        self.assertEqual(entry.url, 'https://amazon.com')
        self.assertIsNone(entry.email_address)

        data = display.projection_to_dict(entry)
        self.assertEqual(list(data.keys()), ['uuid', 'group', 'title', 'username', 'url', 'email_address'])
        self.assertNotIn('password', data)
        self.assertNotIn('notes', data)
        self.assertNotIn('errors', data)

    def test_secure_never_exposes_secrets(self):
        for record in self.records:
            for text in (display.to_json(record), display.to_json(record, reveal=False)):
                self.assertNotIn(record.password, text)
                if record.notes:
                    self.assertNotIn(record.notes, text)

    def test_full_projection(self):
        record = self.records[0]
        entry = display.to_full(record)
        self.assertIsInstance(entry, display.Entry)
        self.assertEqual(entry.password, record.password)
        self.assertEqual(entry.notes, 'security question: blue')
        self.assertEqual(entry.errors, [])

        data = json.loads(display.to_json(record, reveal=True))
        self.assertEqual(list(data.keys()), ['uuid', 'group', 'title', 'password', 'username', 'url',
                                             'email_address', 'notes', 'errors'])
        self.assertEqual(data['password'], 'p@ss')

    def test_full_projection_errors(self):
        records = assemble_all([(0x03, b'title'), (0x04, b'\xff'), END])
        entry = display.to_full(records[0])
        self.assertEqual(len(entry.errors), 1)
        self.assertIn('Error reading field(4)', entry.errors[0])
        self.assertIsNone(entry.username)

    def test_project(self):
        record = self.records[1]
        self.assertIsInstance(display.project(record, False), display.SecureEntry)
        self.assertIsInstance(display.project(record, True), display.Entry)
        self.assertEqual(display.project(record, False), display.project(record, False))
        self.assertEqual(display.to_json(record), display.to_json(record))

    def test_missing_title_and_uuid(self):
        records = assemble_all([(FieldKind.PASSWORD, b'secret'), END])
        data = json.loads(display.to_json(records[0]))
        self.assertEqual(data['uuid'], '')
        self.assertIsNone(data['title'])
        self.assertIsNone(data['group'])

    def test_end_to_end(self):
        stream = [(FieldKind.TITLE, b'amazon'), (FieldKind.GROUP, b'web'), (FieldKind.PASSWORD, b'p@ss'), END]
        record = assemble_all(stream)[0]
        resolution = resolve([record], 'web.amazon')
        self.assertIs(resolution.record, record)
        self.assertNotIn('p@ss', display.to_json(record, reveal=False))
        self.assertIn('p@ss', display.to_json(record, reveal=True))

    def test_formatted_candidates(self):
        text = display.formatted_candidates(self.records[:2])
        lines = text.split('\n')
        self.assertEqual(len(lines), 3)
        self.assertIn('Multiple matches, please be more specific', lines[0])
        self.assertEqual(json.loads(lines[1])['title'], 'amazon')
        self.assertEqual(json.loads(lines[2])['title'], 'amazon-backup')
        self.assertNotIn('p@ss', text)
        self.assertNotIn('backup-pass', text)

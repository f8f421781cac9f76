from unittest import TestCase

from data_vault import END, UUID_AMAZON, UUID_GMAIL, field_stream
from pwsafecommander import search
from pwsafecommander.record import assemble_all
from pwsafecommander.record_types import FieldKind


def named_records(*names):
    stream = []
    for name in names:
        group, _, title = name.partition('.')
        stream.extend([(FieldKind.GROUP, group.encode()), (FieldKind.TITLE, title.encode()), END])
    return assemble_all(stream)


class TestSearch(TestCase):
    def setUp(self):
        self.records = assemble_all(field_stream())

    def test_matches(self):
        record = self.records[0]
        self.assertTrue(search.matches_exactly(record, 'web.amazon'))
        self.assertTrue(search.matches_exactly(record, str(UUID_AMAZON)))
        self.assertFalse(search.matches_exactly(record, 'amazon'))
        self.assertFalse(search.matches_exactly(record, 'WEB.AMAZON'))

        self.assertTrue(search.matches_loosely(record, 'amazon'))
        self.assertTrue(search.matches_loosely(record, 'b.am'))
        self.assertTrue(search.matches_loosely(record, str(UUID_AMAZON)[:8]))
        self.assertFalse(search.matches_loosely(record, 'Amazon'))
        self.assertFalse(search.matches_loosely(record, 'alice'))

    def test_exact_beats_substring(self):
        resolution = search.resolve(self.records, 'web.amazon')
        self.assertIsInstance(resolution, search.Exact)
        self.assertIs(resolution.record, self.records[0])

        records = named_records('web.amazon-backup', 'web.amazon')
        resolution = search.resolve(records, 'web.amazon')
        self.assertIsInstance(resolution, search.Exact)
        self.assertIs(resolution.record, records[1])

    def test_exact_first_in_stream_order(self):
        records = named_records('web.site', 'web.site')
        resolution = search.resolve(records, 'web.site')
        self.assertIsInstance(resolution, search.Exact)
        self.assertIs(resolution.record, records[0])

    def test_resolve_by_uuid(self):
        resolution = search.resolve(self.records, str(UUID_GMAIL))
        self.assertIsInstance(resolution, search.Exact)
        self.assertEqual(resolution.record.title, 'gmail')

    def test_single_substring_match(self):
        resolution = search.resolve(self.records, 'gmai')
        self.assertIsInstance(resolution, search.Exact)
        self.assertIs(resolution.record, self.records[2])

    def test_ambiguous(self):
        resolution = search.resolve(self.records, 'amaz')
        self.assertIsInstance(resolution, search.Ambiguous)
        self.assertEqual(len(resolution.matches), 2)
        self.assertIs(resolution.matches[0], self.records[0])
        self.assertIs(resolution.matches[1], self.records[1])

        records = named_records('b.second-x', 'a.first-x', 'c.other')
        resolution = search.resolve(records, '-x')
        self.assertIsInstance(resolution, search.Ambiguous)
        self.assertEqual([x.display_name for x in resolution.matches], ['b.second-x', 'a.first-x'])

    def test_not_found(self):
        resolution = search.resolve(self.records, 'INVALID')
        self.assertIsInstance(resolution, search.NotFound)

        resolution = search.resolve([], 'web.amazon')
        self.assertIsInstance(resolution, search.NotFound)

    def test_empty_term(self):
        resolution = search.resolve(self.records, '')
        self.assertIsInstance(resolution, search.Ambiguous)
        self.assertEqual(len(resolution.matches), len(self.records))

        resolution = search.resolve(self.records[:1], '')
        self.assertIsInstance(resolution, search.Exact)

    def test_list_records(self):
        records = search.list_records(self.records)
        self.assertEqual(records, self.records)

        records = search.list_records(self.records, '')
        self.assertEqual(len(records), len(self.records))

        records = search.list_records(self.records, 'web.')
        self.assertEqual([x.title for x in records], ['amazon', 'amazon-backup'])

        records = search.list_records(self.records, 'web.amazon')
        self.assertEqual(len(records), 2)

        records = search.list_records(self.records, 'INVALID')
        self.assertEqual(len(records), 0)

    def test_records_without_uuid(self):
        records = named_records('web.amazon')
        self.assertFalse(search.matches_exactly(records[0], ''))
        self.assertIsInstance(search.resolve(records, 'amazon'), search.Exact)

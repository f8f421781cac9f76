#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import argparse
import json
import logging
import os

from . import base
from .base import Command
from .. import api, display, search
from ..error import CommandError


def register_commands(commands):
    commands['list'] = RecordListCommand()
    commands['pass'] = ClipboardCommand()


def register_command_info(aliases, command_info):
    aliases['l'] = 'list'
    aliases['ls'] = 'list'
    aliases['p'] = 'pass'

    for p in [list_parser, clipboard_copy_parser]:
        command_info[p.prog] = p.description


list_parser = argparse.ArgumentParser(prog='list', description='List entries on stdout, one JSON object per line')
list_parser.add_argument('-r', '--reveal', dest='reveal', action='store_true',
                         help='include password, notes and field errors in the output')
list_parser.add_argument('--format', dest='format', action='store', choices=['jsonl', 'json', 'table'],
                         default='jsonl', help='format of output')
list_parser.add_argument('--output', dest='output', action='store',
                         help='path to resulting output file (ignored for "table" format)')
list_parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', help='do not truncate table columns')
list_parser.add_argument('term', nargs='?', type=str, action='store',
                         help='a substring matched against "<group>.<title>" or <uuid> of the entry')


clipboard_copy_parser = argparse.ArgumentParser(
    prog='pass', description='Retrieve a password for an entry',
    epilog='If "<group>.<title>" or <uuid> of an entry equals the term, that entry is used immediately. '
           'Otherwise entries containing the term are searched; when several match they are listed '
           'and nothing is retrieved.')
clipboard_copy_parser.add_argument('-p', '--print', dest='print', action='store_true',
                                   help='print the password to stdout')
clipboard_copy_parser.add_argument('-l', '--login', dest='login', action='store_true',
                                   help='retrieve the username instead of the password')
clipboard_copy_parser.add_argument('term', type=str, action='store',
                                   help='a string matched against "<group>.<title>" or <uuid> of the entry')


SECURE_COLUMNS = ['uuid', 'group', 'title', 'username', 'url', 'email_address']


class RecordListCommand(Command):
    def get_parser(self):
        return list_parser

    def execute(self, params, **kwargs):
        term = kwargs.get('term')
        reveal = kwargs.get('reveal') is True
        fmt = kwargs.get('format') or 'jsonl'
        filename = kwargs.get('output')

        records = search.list_records(api.load_records(params), term)
        if not records:
            logging.info('No records are found')
            return

        if fmt == 'table':
            table = [[getattr(display.to_secure(x), c) for c in SECURE_COLUMNS] for x in records]
            headers = [base.field_to_title(x) for x in SECURE_COLUMNS]
            return base.dump_report_data(table, headers, row_number=True,
                                         column_width=None if kwargs.get('verbose') else 40)

        if fmt == 'json':
            entries = [display.projection_to_dict(display.project(x, reveal)) for x in records]
            report = json.dumps(entries, indent=2, ensure_ascii=False, default=base.json_serialized)
        else:
            report = '\n'.join(display.to_json(x, reveal) for x in records)

        if filename:
            logging.info('Report path: %s', os.path.abspath(filename))
            with open(filename, 'w', encoding='utf-8') as fd:
                fd.write(report)
                fd.write('\n')
            return
        return report


class ClipboardCommand(Command):
    def get_parser(self):
        return clipboard_copy_parser

    def execute(self, params, **kwargs):
        term = kwargs.get('term') or ''
        if not term:
            raise CommandError('pass', 'Search term cannot be empty')

        resolution = search.resolve(api.load_records(params), term)
        if isinstance(resolution, search.NotFound):
            raise CommandError('', 'No matches found.')
        if isinstance(resolution, search.Ambiguous):
            base.print_error(display.formatted_candidates(resolution.matches))
            raise CommandError('pass', f'{len(resolution.matches)} entries match "{term}"')

        rec = resolution.record
        if rec.errors:
            logging.warning('Entry "%s" has %d field(s) that could not be read', rec.display_name, len(rec.errors))

        if kwargs.get('login') is True:
            copy_item = 'Username'
            txt = rec.username
        else:
            copy_item = 'Password'
            txt = rec.password
        if txt is None:
            raise CommandError('pass', f'Entry "{rec.display_name}" has no {copy_item.lower()}')

        if kwargs.get('print') is True:
            print(txt)
        else:
            import pyperclip
            logging.info('Entry: %s', rec.display_name)
            pyperclip.copy(txt)
            logging.info(f'{copy_item} copied to clipboard')

#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import abc
import argparse
import shlex
import sys
from collections import OrderedDict
from typing import Optional, Sequence, List, Any, Dict

from tabulate import tabulate

from .. import error
from ..params import PwsafeParams

aliases = {}                 # type: Dict[str, str]
commands = {}                # type: Dict[str, Command]
command_info = OrderedDict()


class CommandError(error.CommandError):
    def __init__(self, message):
        super().__init__('', message)


class ParseError(Exception):
    pass


def register_commands(commands, aliases, command_info):
    from . import record
    record.register_commands(commands)
    record.register_command_info(aliases, command_info)


def raise_parse_exception(m):
    raise ParseError(m)


def suppress_exit(*args):
    raise ParseError()


def json_serialized(obj):
    return str(obj)


WORDS_TO_CAPITALIZE = {'Id', 'Uid', 'Uuid', 'Url'}


def field_to_title(field):   # type: (str) -> str
    words = field.split('_')
    words = [x.capitalize() for x in words if x]
    words = [x.upper() if x in WORDS_TO_CAPITALIZE else x for x in words]
    return ' '.join(words)


def dump_report_data(data, headers, **kwargs):
    # type: (List[List], Sequence[str], ...) -> None
    # kwargs:
    #           row_number: boolean        - Add row number
    #           column_width: int          - Truncate long columns

    row_number = kwargs.get('row_number')
    if not isinstance(row_number, bool):
        row_number = False
    column_width = kwargs.get('column_width')
    if not isinstance(column_width, int):
        column_width = 0
    if 0 < column_width < 32:
        column_width = 32

    if row_number and headers:
        headers = list(headers)
        headers.insert(0, '#')

    expanded_data = []
    for row_no in range(len(data)):
        row = list(data[row_no])
        if row_number:
            row.insert(0, row_no + 1)
        rowi = []
        for value in row:
            if value is None:
                value = ''
            if column_width > 0:
                if isinstance(value, str) and len(value) > column_width:
                    value = value[:column_width-2] + '...'
            rowi.append(value)
        expanded_data.append(rowi)

    print(tabulate(expanded_data, headers=headers, tablefmt='simple'))


class CliCommand(abc.ABC):
    @abc.abstractmethod
    def execute_args(self, params, args, **kwargs):   # type: (PwsafeParams, str, ...) -> Any
        pass


class Command(CliCommand):
    def execute(self, params, **kwargs):     # type: (PwsafeParams, Any) -> Any
        raise NotImplementedError()

    def execute_args(self, params, args, **kwargs):
        # type: (PwsafeParams, str, ...) -> Any

        d = {}
        d.update(kwargs)
        parser = self._get_parser_safe()
        args = '' if args is None else args
        if parser:
            try:
                opts = parser.parse_args(shlex.split(args))
            except ParseError as e:
                if e.args and e.args[0]:
                    raise CommandError(str(e.args[0]))
                return
            d.update(opts.__dict__)

        return self.execute(params, **d)

    def get_parser(self):   # type: () -> Optional[argparse.ArgumentParser]
        return None

    def _ensure_parser(func):
        def _wrapper(self):
            parser = func(self)
            if parser:
                if parser.exit != suppress_exit:
                    parser.exit = suppress_exit
                if parser.error != raise_parse_exception:
                    parser.error = raise_parse_exception
            return parser
        return _wrapper

    @_ensure_parser
    def _get_parser_safe(self):
        return self.get_parser()
    _ensure_parser = staticmethod(_ensure_parser)


def print_error(message):    # type: (str) -> None
    print(message, file=sys.stderr)

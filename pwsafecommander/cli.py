#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import logging
import sys

from .commands import register_commands, commands, aliases, command_info
from .commands.base import dump_report_data
from .display import bcolors
from .error import CommandError, Error
from .params import PwsafeParams

register_commands(commands, aliases, command_info)


def display_command_help():
    alias_lookup = {}
    for alias, cmd in aliases.items():
        alias_lookup.setdefault(cmd, []).append(alias)

    print(f'\n{bcolors.BOLD}{bcolors.UNDERLINE}Commands:{bcolors.ENDC}')
    table = []
    for cmd, description in command_info.items():
        table.append([cmd, ', '.join(alias_lookup.get(cmd, [])), description])
    dump_report_data(table, headers=['Command', 'Alias', 'Description'])
    print('')
    print('Type \'command -h\' to display help on command')


def command_and_args_from_cmd(command_line):
    args = ''
    pos = command_line.find(' ')
    if pos > 0:
        cmd = command_line[:pos]
        args = command_line[pos + 1:].strip()
    else:
        cmd = command_line.strip()

    return cmd, args


def do_command(params, command_line):    # type: (PwsafeParams, str) -> any
    cmd, args = command_and_args_from_cmd(command_line)
    orig_cmd = cmd
    if cmd in aliases and cmd not in commands:
        cmd = aliases[cmd]

    command = commands.get(cmd)
    if not command:
        display_command_help()
        if cmd not in ('', 'help', '?'):
            raise CommandError('', f'Invalid command: {orig_cmd}')
        return
    return command.execute_args(params, args, command=orig_cmd)


def run_command(params, command_line):    # type: (PwsafeParams, str) -> int
    """Executes one command and returns the process exit code"""
    try:
        result = do_command(params, command_line)
        if result is not None:
            print(result)
        return 0
    except CommandError as e:
        msg = f'{e.command}: {e.message}' if e.command else f'{e.message}'
        logging.error(msg)
    except Error as e:
        logging.error('Error reading %s: %s', params.dbfile, e.message)
    except KeyboardInterrupt:
        logging.info('Canceled')
    except Exception as e:
        logging.debug(e, exc_info=True)
        logging.error('An unexpected error occurred: %s', sys.exc_info()[0])
    return 1

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
import shlex
import sys
from pathlib import Path
from typing import Optional

from . import __version__, __logging_format__
from . import cli
from .error import Error
from .params import PwsafeParams


def get_params_from_config(config_filename=None):    # type: (Optional[str]) -> PwsafeParams
    if os.getenv('PWSAFE_DEBUG'):
        logging.getLogger().setLevel(logging.DEBUG)
        logging.info('Debug ON')

    def get_env_config():
        path = os.getenv('PWSAFE_CONFIG_FILE')
        if path:
            logging.debug(f'Setting config file from PWSAFE_CONFIG_FILE env variable {path}')
        return path

    def get_default_path():
        return Path.home().joinpath('.pwsafe', 'config.json')

    config_filename = config_filename or get_env_config()
    if not config_filename:
        default_path = get_default_path()
        if default_path.is_file():
            config_filename = str(default_path)

    params = PwsafeParams()
    if os.getenv('PWSAFE_DEBUG'):
        params.debug = True
    if config_filename:
        try:
            with open(config_filename) as config_file:
                params.config = json.load(config_file)
        except IOError as ioe:
            raise Error(f'Unable to open config file {config_filename}: {ioe}')
        except ValueError:
            raise Error(f'Unable to parse JSON configuration file "{os.path.abspath(config_filename)}"')
        if not isinstance(params.config, dict):
            raise Error(f'Configuration file "{os.path.abspath(config_filename)}" must contain a JSON object')
        if params.config.get('dbfile'):
            params.dbfile = params.config['dbfile']
        if params.config.get('debug') is True:
            params.debug = True

    dbfile = os.getenv('PWSAFE_DB')
    if dbfile:
        params.dbfile = dbfile

    return params


def usage(m):
    print(m)
    parser.print_help()
    cli.display_command_help()
    sys.exit(1)


parser = argparse.ArgumentParser(prog='pwsafe', add_help=False, allow_abbrev=False)
parser.add_argument('--dbfile', '-d', dest='dbfile', action='store',
                    help='The pwsafe3 database file to read. Defaults to $PWSAFE_DB or pwsafe3.db')
parser.add_argument('--config', dest='config', action='store', help='Config file to use')
parser.add_argument('--debug', dest='debug', action='store_true', help='Turn on debug mode')
parser.add_argument('--version', dest='version', action='store_true', help='Display version')
parser.add_argument('command', nargs='?', type=str, action='store', help='Command')
parser.add_argument('options', nargs=argparse.REMAINDER, help='Command options')
parser.error = usage


def main():
    logging.basicConfig(format=__logging_format__)
    logging.getLogger().setLevel(logging.INFO)

    opts, flags = parser.parse_known_args(sys.argv[1:])

    if opts.version:
        print(f'pwsafe Commander, version {__version__}')
        sys.exit(0)

    try:
        params = get_params_from_config(opts.config)
    except Error as e:
        logging.error(e.message)
        sys.exit(1)

    if opts.debug:
        params.debug = opts.debug
    if params.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if opts.dbfile:
        params.dbfile = opts.dbfile

    if flags or not opts.command:
        usage('')

    options = ' '.join([shlex.quote(x) for x in opts.options]) if opts.options else ''
    command = f'{opts.command} {options}'.strip()

    errno = cli.run_command(params, command)
    params.clear_session()
    sys.exit(errno)


if __name__ == '__main__':
    main()

#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

import getpass
import logging
import os

from .error import ContainerError
from .params import PwsafeParams
from .pwsafe3 import PwsafeReader
from .record import RecordAssembler


def prompt_password(params):    # type: (PwsafeParams) -> str
    if not params.password:
        params.password = os.getenv('PWSAFE_PASSWORD') or ''
    if not params.password:
        try:
            params.password = getpass.getpass(prompt='Password: ', stream=None)
        except (EOFError, KeyboardInterrupt):
            raise ContainerError('Unable to read password')
    return params.password


def load_records(params):    # type: (PwsafeParams) -> list
    """Decrypts the database file and assembles its records into params.records.

    The HMAC is verified before the records are handed out, so nothing is returned
    from a file that fails the integrity check.
    """
    if params.records is not None:
        return params.records

    if not os.path.isfile(params.dbfile):
        raise ContainerError('File not found')

    password = prompt_password(params)
    try:
        reader = PwsafeReader.open(params.dbfile, password)
    except OSError as e:
        raise ContainerError(f'Unable to open file: {e}')

    with reader:
        records = RecordAssembler().assemble_all(reader)
        reader.verify()

    logging.debug('Loaded %d record(s) from %s', len(records), params.dbfile)
    params.records = records
    return records

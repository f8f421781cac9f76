#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#
from __future__ import annotations

from typing import List, Optional

from .record import Record

DEFAULT_DBFILE = 'pwsafe3.db'


class PwsafeParams:
    """ Global storage of data during the run """

    def __init__(self, config=None, dbfile=''):
        self.config = config or {}
        self.dbfile = dbfile or DEFAULT_DBFILE
        self.password = ''
        self.debug = False
        self.records = None    # type: Optional[List[Record]]

    def clear_session(self):
        self.password = ''
        self.records = None

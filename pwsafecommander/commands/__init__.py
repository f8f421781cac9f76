#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

from .base import register_commands, aliases, commands, command_info

__all__ = ['register_commands', 'aliases', 'commands', 'command_info']

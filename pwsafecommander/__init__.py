#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

__version__ = '1.0.0'
__logging_format__ = '%(message)s'

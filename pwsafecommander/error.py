#                          __
#  _ ____ __ _____ __ _   / _|___
# | '_ \ V  V (_-</ _` | |  _/ -_)
# | .__/\_/\_//__/\__,_| |_| \___|
# |_|
#
# pwsafe Commander
#

class Error(Exception):
    """Base class for exceptions in this module."""
    def __init__(self, message):
        self.message = message

    def __str__(self):
        return self.message


class CommandError(Error):
    def __init__(self, command, message):
        super().__init__(message)
        self.command = command

    def __str__(self):
        if self.command:
            return f'{self.command}: {self.message}'
        else:
            return super().__str__()


class ContainerError(Error):
    """Exception raised when a password safe file cannot be read
    """


class InvalidPasswordError(ContainerError):
    def __init__(self, message='Invalid password'):
        super().__init__(message)


class IntegrityError(ContainerError):
    """Exception raised when the stored HMAC does not match the decrypted content
    """


class FieldDecodeError(Error):
    def __init__(self, field_type, message):
        super().__init__(message)
        self.field_type = field_type

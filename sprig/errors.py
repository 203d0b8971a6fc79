

class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass

class SprigSyntaxError(SprigError):
    """ Raised when the program tree is malformed or cannot be read"""

class SprigUnboundIdentifier(SprigError):
    """ Raised when a name is looked up or assigned before it is declared"""

class SprigArityError(SprigError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class SprigTypeError(SprigError):
    """ Raised when a descriptor does not have the expected value kind"""

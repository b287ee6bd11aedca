
class MinilangError(Exception):
    """ Base class for all minilang errors"""
    pass

class MinilangSyntaxError(MinilangError):
    """ Raised when the token stream or a form is malformed"""

class MinilangUnboundSymbol(MinilangError):
    """ Raised when an identifier is used before it is bound"""

class MinilangNameError(MinilangError):
    """ Raised when a name is bound twice in one rib, or ribs are misused"""

class MinilangArityError(MinilangError):
    """ Raised when the number of arguments passed to a function, macro or let is incorrect"""

class MinilangTypeError(MinilangError):
    """ Raised when the types of arguments passed to a form are incorrect"""

class MinilangOverflowError(MinilangError):
    """ Raised when arithmetic leaves the unsigned 32-bit range"""

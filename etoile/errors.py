class EtoileError(Exception):
    """ Base class for all Etoile errors"""
    pass

class EtoileSyntaxError(EtoileError):
    """ Raised when source text cannot be parsed"""

class EtoileUnboundSymbol(EtoileError):
    """ Raised when a symbol is used before it is bound"""
    pass

class EtoileInvalidSymbol(EtoileError):
    """ Raised when a Symbol is required but something else was given"""
    pass

class EtoileArityError(EtoileError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

class EtoileTypeError(EtoileError):
    """ Raised when a value has the wrong type for the operation"""

class EtoileInvalidExpression(EtoileError):
    """ Raised when an expression has no valid evaluation (empty list, bad head)"""

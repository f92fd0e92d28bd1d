

class ArborError(Exception):
    """ Base class for all Arbor errors"""
    pass

class ArborArityError(ArborError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class ArborTypeError(ArborError):
    """ Raised when an operand is of the wrong value kind"""

class ArborDivisionByZero(ArborError):
    """ Raised when div or mod is given a zero divisor"""

class ArborIndexError(ArborError):
    """ Raised when an array index is negative or past the end"""

class ArborEmptyCollection(ArborError):
    """ Raised when an operation needs at least one element"""

class ArborUnboundSymbol(ArborError):
    """ Raised when a name is assigned (or, in strict mode, read) before it is bound"""

class ArborNoMatchingClause(ArborError):
    """ Raised when no clause of a cond has a true condition"""

class ArborNotAProcedure(ArborError):
    """ Raised when a value that is not a builtin or closure is applied"""

class ArborSyntaxError(ArborError):
    """ Raised when a node appears where it is not allowed or is malformed"""

class ArborReadError(ArborSyntaxError):
    """ Raised when a JSON document does not describe a valid expression tree"""

class ArborDomainError(ArborError):
    """ Raised when a numeric argument is outside the domain of a builtin"""

class ArborOverflowError(ArborError):
    """ Raised when an arithmetic result does not fit in a signed 64-bit integer"""

# IN THIS FILE: ERRORS RAISED WHILE VALIDATING ROBOT INPUT


class InstructionError(ValueError):
    """
    Raised when an instruction string (or a starting heading) is rejected.
    Subclasses ValueError so the server can map it straight to a 400.
    """

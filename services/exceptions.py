# services/exceptions.py

class SessionError(Exception):
    pass


class EmptyInputError(SessionError):
    pass


class AnalysisBusyError(SessionError):
    pass

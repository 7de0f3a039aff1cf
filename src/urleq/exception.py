__author__ = "urleq"


class UrleqError(Exception):
    def __init__(self, errmsg, value=None, *args):
        Exception.__init__(self, errmsg, *args)
        self.value = value


class DecompositionError(UrleqError):
    """The value can not be broken down into URL components."""

    @property
    def url(self):
        return self.value


class UnknownComponent(UrleqError, ValueError):
    pass

# Exceptions raised by pazzfraze


class PazzfrazeError(Exception):
    pass


class ConstructionError(PazzfrazeError, ValueError):

    """Input could not be turned into a usable object (e.g. a word list)."""


class EmptyWordListError(ConstructionError):

    def __init__(self, msg="no words found in word list"):
        ConstructionError.__init__(self, msg)


class ConfigurationError(PazzfrazeError, ValueError):

    """Invalid entropy, word count or other setting."""

"""Generate nice-looking passwords out of a master password and a domain name.

    >>> from pazzfraze import Config, load_wordlist
    >>> conf = Config(load_wordlist()).with_entropy(45).with_style_camel()
    >>> password = conf.generate("master password", "example.com")

"""

from .errors import PazzfrazeError, ConstructionError, EmptyWordListError, ConfigurationError
from .wordlist import WordList, load_wordlist
from .style import Style, Pascal, Camel, Concat
from .generator import Config, DEFAULT_ENTROPY

__all__ = (
    'PazzfrazeError', 'ConstructionError', 'EmptyWordListError', 'ConfigurationError',
    'WordList', 'load_wordlist',
    'Style', 'Pascal', 'Camel', 'Concat',
    'Config', 'DEFAULT_ENTROPY',
)

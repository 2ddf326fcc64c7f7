# Config
# (password generator configuration and the generator itself)
#

import copy
import math
import logging

from .backend import SecureMemory
from .derivation import secure_hash, ITERATIONS
from .errors import ConfigurationError
from .rng import ChaChaRng, SEED_SIZE
from .style import Style, Pascal, Camel, Concat
from .wordlist import WordList

log = logging.getLogger(__name__)

DEFAULT_ENTROPY = 48.0
MAX_ITERATIONS = 2 ** 32  # round counter is hashed as 32-bit integer


def words_for_entropy(word_list: WordList, entropy: float) -> int:
    """Number of words needed to reach at least `entropy` bits."""
    if math.isnan(entropy) or math.isinf(entropy) or entropy < 0:
        raise ConfigurationError(f"entropy must be a non-negative number, got {entropy!r}")
    bits_per_word = math.log2(len(word_list))
    if bits_per_word == 0:
        if entropy == 0:
            return 0
        raise ConfigurationError("a word list with a single word carries no entropy")
    return math.ceil(entropy / bits_per_word)


class Config:

    """The necessary configuration to generate a password.

    Currently consisting of:

    - A word list.
    - An amount of words in the password.
    - A style for joining the words together.

    Config is immutable, the ``with_*`` methods return a modified copy.
    The word list is shared, not copied.

    """

    def __init__(self, word_list: WordList):
        self._word_list = word_list
        self._style = Pascal()
        self._iterations = ITERATIONS
        self._word_count = words_for_entropy(word_list, DEFAULT_ENTROPY)

    def _replace(self, **attrs) -> 'Config':
        conf = copy.copy(self)
        for name, value in attrs.items():
            setattr(conf, '_' + name, value)
        return conf

    def __repr__(self):
        return (f"{self.__class__.__name__}(word_list={self._word_list!r}, "
                f"word_count={self._word_count}, style={self._style!r}, "
                f"iterations={self._iterations})")

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return (self._word_list is other._word_list
                and self._word_count == other._word_count
                and self._style == other._style
                and self._iterations == other._iterations)

    __hash__ = None

    @property
    def word_list(self) -> WordList:
        return self._word_list

    def with_word_list(self, word_list: WordList) -> 'Config':
        """Use another word list, keeping word count and style."""
        return self._replace(word_list=word_list)

    @property
    def word_count(self) -> int:
        return self._word_count

    def with_word_count(self, word_count: int) -> 'Config':
        if word_count < 0:
            raise ConfigurationError(f"word count must not be negative, got {word_count}")
        return self._replace(word_count=int(word_count))

    def with_entropy(self, entropy: float) -> 'Config':
        """Set word count to reach at least `entropy` bits."""
        return self._replace(word_count=words_for_entropy(self._word_list, entropy))

    def entropy(self) -> float:
        """Actual entropy of generated passwords, in bits."""
        return math.log2(len(self._word_list)) * self._word_count

    @property
    def style(self) -> Style:
        return self._style

    def with_style(self, style: Style) -> 'Config':
        return self._replace(style=style)

    def with_style_pascal(self) -> 'Config':
        return self.with_style(Pascal())

    def with_style_camel(self) -> 'Config':
        return self.with_style(Camel())

    def with_style_concat(self, separator: str = '') -> 'Config':
        return self.with_style(Concat(separator))

    @property
    def iterations(self) -> int:
        return self._iterations

    def with_iterations(self, iterations: int) -> 'Config':
        """Set number of hashing rounds per derivation phase.

        Anything but the default produces different passwords.

        """
        if not 0 < iterations <= MAX_ITERATIONS:
            raise ConfigurationError(f"iterations must be in range 1..{MAX_ITERATIONS}, "
                                     f"got {iterations}")
        return self._replace(iterations=int(iterations))

    def generate(self, master, domain) -> str:
        """Generate password for `domain` from `master` password.

        Both arguments are ``bytes`` or ``str`` (encoded as UTF-8).
        Same inputs and configuration always give the same password.

        """
        if isinstance(master, str):
            master = master.encode('utf-8')
        if isinstance(domain, str):
            domain = domain.encode('utf-8')
        # Hash the master password and the domain together
        with secure_hash(master, domain, self._iterations) as digest:
            # Use first part of the hash to seed the generator
            with SecureMemory(digest[:SEED_SIZE]) as seed:
                rng = ChaChaRng(bytes(seed))
        # Select words one at a time, the order of draws is significant
        out = []
        count = len(self._word_list)
        for i in range(self._word_count):
            idx = rng.gen_range(0, count)
            self._style.push(self._word_list.word(idx), out,
                             i == 0, i == self._word_count - 1)
        log.debug("Generated %d words, %.1f bits of entropy",
                  self._word_count, self.entropy())
        return ''.join(out)

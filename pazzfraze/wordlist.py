# WordList
# (candidate words for password generation)
#

import re
import functools
from pathlib import Path

from .errors import EmptyWordListError

BUNDLED_WORDLIST_PATH = Path(__file__).parent / 'words.txt'

_word_re = re.compile(r'\S+')


class WordList:

    """Immutable list of words parsed from a text blob.

    Any run of whitespace separates words. The text is kept as is
    and each word is recorded as an ``(offset, length)`` span into it,
    in order of appearance.

    :raises EmptyWordListError: when the text contains no words

    """

    __slots__ = ('_text', '_spans')

    def __init__(self, text: str):
        self._text = text
        self._spans = tuple((m.start(), m.end() - m.start())
                            for m in _word_re.finditer(text))
        if not self._spans:
            raise EmptyWordListError()

    @classmethod
    def from_file(cls, path) -> 'WordList':
        """Read UTF-8 encoded word list from `path`."""
        with open(Path(path).expanduser(), 'r', encoding='utf-8') as f:
            return cls(f.read())

    @property
    def text(self) -> str:
        return self._text

    @property
    def spans(self) -> tuple:
        return self._spans

    def word(self, idx: int) -> str:
        """Return word at `idx`, which must be in ``range(len(self))``."""
        start, length = self._spans[idx]
        return self._text[start:start + length]

    __getitem__ = word

    def __len__(self):
        return len(self._spans)

    def __iter__(self):
        for idx in range(len(self._spans)):
            yield self.word(idx)

    def __repr__(self):
        return f"{self.__class__.__name__}(<{len(self)} words>)"


@functools.lru_cache(maxsize=None)
def load_wordlist(path=None) -> WordList:
    """Load and return a word list.

    Default is the word list bundled with the package.
    Loaded lists are cached by path.

    """
    return WordList.from_file(path or BUNDLED_WORDLIST_PATH)

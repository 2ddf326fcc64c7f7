# Host embedding
# (single entry point over a process-wide word list)
#

import threading

from .generator import Config
from .style import Pascal
from .wordlist import WordList, BUNDLED_WORDLIST_PATH

EMBED_ENTROPY = 45.0

_lock = threading.Lock()
_word_list = None


def _read_bundled() -> str:
    return BUNDLED_WORDLIST_PATH.read_text(encoding='utf-8')


def init(text: str = None) -> WordList:
    """Install the process-wide word list, parsed from `text`.

    Default is the bundled word list. Must be called before anything
    else has used the word list, otherwise RuntimeError is raised.

    """
    global _word_list
    with _lock:
        if _word_list is not None:
            raise RuntimeError("word list has already been initialized")
        _word_list = WordList(_read_bundled() if text is None else text)
        return _word_list


def word_list() -> WordList:
    """Return the process-wide word list, loading the bundled one on first use."""
    global _word_list
    if _word_list is None:
        with _lock:
            if _word_list is None:
                _word_list = WordList(_read_bundled())
    return _word_list


def generate(master: str, domain: str) -> str:
    conf = Config(word_list()).with_entropy(EMBED_ENTROPY).with_style(Pascal())
    return conf.generate(master, domain)

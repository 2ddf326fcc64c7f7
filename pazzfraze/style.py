# Style
# (how consecutive words are joined into a password)
#

from .errors import ConfigurationError


def capitalize(word: str) -> str:
    """Uppercase the first character, leave the rest unchanged.

    Unlike :meth:`str.capitalize`, the rest of the word is not lowercased.
    The uppercase mapping may expand a character (``'ß'`` -> ``'SS'``).

    """
    return word[:1].upper() + word[1:]


class Style:

    """Base of the closed set of join styles: Pascal, Camel, Concat."""

    name = None

    def push(self, word: str, into: list, first: bool, last: bool):
        """Append `word` to `into` (list of string fragments).

        `first` marks the first word of the password. `last` is accepted
        for symmetry, no style uses it.

        """
        raise NotImplementedError

    def join(self, words) -> str:
        words = list(words)
        out = []
        for i, word in enumerate(words):
            self.push(word, out, i == 0, i == len(words) - 1)
        return ''.join(out)

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Pascal(Style):

    """``MyGreatPassword``"""

    name = 'pascal'

    def push(self, word, into, first, last):
        into.append(capitalize(word))


class Camel(Style):

    """``myGreatPassword``"""

    name = 'camel'

    def push(self, word, into, first, last):
        into.append(word if first else capitalize(word))


class Concat(Style):

    """For example, if the separator is ``_``: ``my_great_password``"""

    name = 'concat'

    def __init__(self, separator: str = ''):
        self.separator = separator

    def push(self, word, into, first, last):
        if not first:
            into.append(self.separator)
        into.append(word)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.separator!r})"


STYLES = {style.name: style for style in (Pascal, Camel, Concat)}


def style_by_name(name: str, separator: str = '') -> Style:
    """Create style from its `name` ('pascal', 'camel' or 'concat')."""
    try:
        style_cls = STYLES[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(f"unknown style {name!r}, "
                                 f"choose one of: {', '.join(STYLES)}") from None
    if style_cls is Concat:
        return Concat(separator)
    return style_cls()

import sys
import time
import logging
import argparse
import configparser
from pathlib import Path

from .backend import SecureMemory
from .errors import ConfigurationError, EmptyWordListError
from .generator import Config
from .style import style_by_name, Concat
from .ui import PazzfrazeUI
from .wordlist import WordList

DATA_DIR = Path('~/.pazzfraze')

log = logging.getLogger(__name__)


class Settings:

    """User defaults from the settings file.

    Each setting becomes a step, a ``(Config method name, args)`` tuple,
    applied before those given on command line.

    """

    def __init__(self, config_file):
        self.steps = []
        self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        log.debug("Loading settings %r", str(config_file))
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'pazzfraze':
                log.warning("unknown section %r in config %r", section, str(config_file))
                continue
            section = config[section]
            style, separator = None, None
            for key in section:
                if key == 'style':
                    style = section[key]
                elif key == 'separator':
                    separator = section[key]
                elif key == 'entropy':
                    self.steps.append(('with_entropy', (self._get(section, key, float),)))
                elif key == 'length':
                    self.steps.append(('with_word_count', (self._get(section, key, int),)))
                elif key == 'iterations':
                    self.steps.append(('with_iterations', (self._get(section, key, int),)))
                else:
                    log.warning("unknown key [%s] %r in config %r",
                                section.name, key, str(config_file))
            if style is not None or separator is not None:
                style = style_by_name(style or Concat.name, separator or '')
                self.steps.append(('with_style', (style,)))

    @staticmethod
    def _get(section, key, type_):
        try:
            return type_(section[key])
        except ValueError:
            raise ConfigurationError(f"invalid value for [{section.name}] {key!r}: "
                                     f"{section[key]!r}") from None


class ConfigStep(argparse.Action):

    """Record the option as a Config method call.

    Steps keep the command line order, last one wins.

    """

    def __init__(self, option_strings, dest, method, **kwargs):
        super().__init__(option_strings, 'steps', **kwargs)
        self.method = method

    def __call__(self, parser, namespace, values, option_string=None):
        steps = list(getattr(namespace, self.dest, None) or [])
        args = tuple(values) if isinstance(values, list) else (values,)
        steps.append((self.method, args))
        setattr(namespace, self.dest, steps)


def run_generate(wordlist, master, domain, steps, config_file, copy):
    ui = PazzfrazeUI()
    try:
        settings = Settings(config_file)
    except (ConfigurationError, configparser.Error) as e:
        ui.error(f"failed to load config {str(config_file)!r}: {e}")
        return
    # Open wordlist
    try:
        words = WordList.from_file(wordlist)
    except (OSError, UnicodeDecodeError) as e:
        ui.error(f'failed to open wordlist at "{wordlist}": {e}')
        return
    except EmptyWordListError:
        ui.error(f'no words found in wordlist at "{wordlist}"')
        return
    # Create config
    try:
        conf = Config(words)
        for method, args in settings.steps + steps:
            conf = getattr(conf, method)(*args)
    except ConfigurationError as e:
        ui.error(str(e))
        return
    if master == '-':
        master = ui.ask_master()
        if master is None:
            return
    # Generate password
    start = time.perf_counter()
    with SecureMemory(master.encode('utf-8')) as master_bytes:
        password = conf.generate(bytes(master_bytes), domain.encode('utf-8'))
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    ui.show_password(password, conf.entropy(), elapsed_ms, copy=copy)


def build_parser():
    ap = argparse.ArgumentParser(prog="pazzfraze",
                                 description="Generate nice-looking passwords "
                                             "out of a master password and a domain name.",
                                 epilog="Options must precede the positional arguments.",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('-p', '--pascal', action=ConfigStep, method='with_style_pascal', nargs=0,
                    help="use `PascalStyle` (default)")
    ap.add_argument('-c', '--camel', action=ConfigStep, method='with_style_camel', nargs=0,
                    help="use `camelStyle`")
    ap.add_argument('-s', '--concat', action=ConfigStep, method='with_style_concat',
                    nargs='?', const='', metavar='SEP',
                    help="concatenate words with an optional separator string")
    ap.add_argument('-e', '--entropy', action=ConfigStep, method='with_entropy', type=float,
                    metavar='BITS',
                    help="bits of entropy of the password (default: 48)")
    ap.add_argument('-l', '--length', action=ConfigStep, method='with_word_count', type=int,
                    metavar='WORDS',
                    help="number of words to form the password")
    ap.add_argument('-i', '--iterations', action=ConfigStep, method='with_iterations', type=int,
                    metavar='N',
                    help="hashing rounds per phase (default: 25000)\n"
                         "changes all passwords, keep the default unless you know why")
    ap.add_argument('--copy', action='store_true',
                    help="copy the password to clipboard instead of printing it")
    ap.add_argument('-C', '--config', dest='config_file',
                    default=DATA_DIR / 'pazzfraze.conf',
                    help="settings file (default: %(default)s)")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="print debug messages")
    ap.add_argument('wordlist', help="word list file, words separated by whitespace")
    ap.add_argument('master', help="master password ('-' to prompt for it)")
    ap.add_argument('domain', help="domain name, e.g. example.com")
    ap.set_defaults(steps=[])
    return ap


def parse_args(argv=None):
    """Process command line args.

    The last three args are positional, everything before them are options.
    This allows a master password starting with a dash and
    ``--concat`` without a separator.

    """
    if argv is None:
        argv = sys.argv[1:]
    ap = build_parser()
    if len(argv) >= 3 and '--' not in argv:
        argv = list(argv[:-3]) + ['--'] + list(argv[-3:])
    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: None
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')
    run_generate(args.wordlist, args.master, args.domain, args.steps,
                 args.config_file, args.copy)


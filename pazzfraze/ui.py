# PazzfrazeUI
# (terminal interaction: master password prompt, clipboard, status lines)
#
# Everything except the password itself goes to stderr,
# so the output can be piped.

import sys
import math

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import create_output
from blessed import Terminal
import pyperclip


class PazzfrazeUI:

    def __init__(self, stream=None):
        self._stream = stream or sys.stderr
        self._term = Terminal(stream=self._stream)

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)

    def _input_pass(self, prompt):
        """Wraps password prompt to allow overriding."""
        session = PromptSession(output=create_output(stdout=sys.stderr))
        return session.prompt(FormattedText([('bold', prompt)]), is_password=True)

    def _print(self, *args):
        print(*args, file=self._stream)

    ############
    # Messages #
    ############

    def info(self, text):
        self._print(text)

    def warning(self, text):
        self._print(self._term.bright_yellow(text))

    def error(self, text):
        self._print(self._term.bright_red(text))

    ############
    # Commands #
    ############

    def ask_master(self, confirm=True):
        """Prompt for master password, twice if `confirm`.

        :returns: The password or None when canceled or not matching.

        """
        try:
            master = self._input_pass("Master password: ")
            if confirm:
                master_check = self._input_pass("Confirm master password: ")
        except (KeyboardInterrupt, EOFError):
            self._print()
            return None
        if confirm and master != master_check:
            self.error("Passwords don't match")
            return None
        return master

    def show_password(self, password: str, entropy: float, elapsed_ms: int, copy=False):
        entropy = math.floor(entropy * 10) / 10
        self._print(self._term.bold(f"Generated password with {entropy:.1f} bits "
                                    f"of entropy in {elapsed_ms}ms:"))
        if copy:
            self._copy(password)
            self._print(self._term.bright_green("Password copied to clipboard."))
        else:
            print(password)
            self.warning("Remember to clear the terminal afterwards")

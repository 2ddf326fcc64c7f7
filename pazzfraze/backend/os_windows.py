from ctypes import windll, cdll, c_void_p, c_size_t, c_int
import logging
import sys

VirtualLock = windll.kernel32.VirtualLock
memset = cdll.msvcrt.memset
log = logging.getLogger(__name__)

err_hint = \
    "(lookup the error code in " \
    "https://docs.microsoft.com/en-us/windows/win32/debug/system-error-codes)"


def memory_lock(addr, size):
    """Try to lock an address against being swapped.

    Encountering error while locking memory is not considered fatal,
    no exception is raised.

    The memory page is locked until the process terminates.
    Note that calls to VirtualLock do not stack, so a constructor/destructor
    pattern in SecureMemory would not work if we called VirtualUnlock.
    It would unlock the memory even when another instance wanted to keep
    it locked.

    """
    try:
        ok = VirtualLock(c_void_p(addr), c_size_t(size))
    except OSError as e:
        log.warning("Unable to lock memory: %s", e)
        return
    if not ok:  # pragma: no cover
        err = windll.kernel32.GetLastError()
        log.warning("VirtualLock: %s %s", err, err_hint)


def memory_clear(addr, size):
    try:
        memset(c_void_p(addr), c_int(0), c_size_t(size))
    except OSError as e:
        log.warning("Unable to clear memory: %s", e)


class SecureMemory:

    """Memlock the memory (do not allow swap).

    Zero the memory in deleter or by explicit :meth:`wipe`.
    This is a little hacky, it depends on CPython and its bytes object
    implementation. The wrapped object must not be shared.

    """

    def __init__(self, data: bytes):
        self._data = data
        self._wiped = False
        addr = id(self._data)
        size = sys.getsizeof(self._data)
        memory_lock(addr, size)

    def __del__(self):
        self.wipe()

    def wipe(self):
        if self._wiped:
            return
        if len(self._data) < 2:
            # CPython shares empty and single-byte bytes objects
            self._wiped = True
            return
        addr = id(self._data)
        brutto = sys.getsizeof(self._data)
        netto = len(self._data)
        # CPython assumption:
        # bytes object has header, followed by data and 1 byte terminator
        memory_clear(addr + (brutto - netto - 1), netto)
        self._wiped = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.wipe()

    def __bytes__(self):
        return self._data

    def __len__(self):
        return len(self._data)

    def __getitem__(self, item):
        return self._data[item]

    def __eq__(self, other):
        return self._data == bytes(other)

    def __repr__(self):
        return f"{self.__class__.__name__}(<{len(self._data)} bytes>)"

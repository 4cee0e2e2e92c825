"""Classifier for system and well-known third-party headers.

Includes listed here are expected not to resolve to a file in the scanned
tree, so they are not reported as unknown.
"""

from typing import FrozenSet, Iterable, Optional, Tuple

C_HEADERS: FrozenSet[str] = frozenset(
    {
        "assert.h", "complex.h", "ctype.h", "errno.h", "fenv.h", "float.h",
        "inttypes.h", "iso646.h", "limits.h", "locale.h", "math.h",
        "setjmp.h", "signal.h", "stdalign.h", "stdarg.h", "stdatomic.h",
        "stdbool.h", "stddef.h", "stdint.h", "stdio.h", "stdlib.h",
        "stdnoreturn.h", "string.h", "tgmath.h", "threads.h", "time.h",
        "uchar.h", "wchar.h", "wctype.h",
    }
)

CXX_HEADERS: FrozenSet[str] = frozenset(
    {
        "algorithm", "any", "array", "atomic", "barrier", "bit", "bitset",
        "cassert", "cctype", "cerrno", "cfenv", "cfloat", "charconv",
        "chrono", "cinttypes", "climits", "clocale", "cmath", "codecvt",
        "compare", "complex", "concepts", "condition_variable",
        "coroutine", "csetjmp", "csignal", "cstdarg", "cstddef", "cstdint",
        "cstdio", "cstdlib", "cstring", "ctime", "cuchar", "cwchar",
        "cwctype", "deque", "exception", "execution", "expected",
        "filesystem", "format", "forward_list", "fstream", "functional",
        "future", "initializer_list", "iomanip", "ios", "iosfwd",
        "iostream", "istream", "iterator", "latch", "limits", "list",
        "locale", "map", "memory", "memory_resource", "mutex", "new",
        "numbers", "numeric", "optional", "ostream", "print", "queue",
        "random", "ranges", "ratio", "regex", "scoped_allocator",
        "semaphore", "set", "shared_mutex", "source_location", "span",
        "sstream", "stack", "stdexcept", "stop_token", "streambuf",
        "string", "string_view", "syncstream", "system_error", "thread",
        "tuple", "type_traits", "typeindex", "typeinfo", "unordered_map",
        "unordered_set", "utility", "valarray", "variant", "vector",
        "version",
    }
)

POSIX_HEADERS: FrozenSet[str] = frozenset(
    {
        "aio.h", "arpa/inet.h", "dirent.h", "dlfcn.h", "fcntl.h",
        "fnmatch.h", "glob.h", "grp.h", "netdb.h", "netinet/in.h",
        "netinet/tcp.h", "poll.h", "pthread.h", "pwd.h", "sched.h",
        "semaphore.h", "spawn.h", "strings.h", "sys/ioctl.h", "sys/mman.h",
        "sys/resource.h", "sys/select.h", "sys/socket.h", "sys/stat.h",
        "sys/time.h", "sys/types.h", "sys/uio.h", "sys/un.h", "sys/wait.h",
        "syslog.h", "termios.h", "unistd.h", "utime.h",
        "windows.h", "winsock2.h", "ws2tcpip.h",
    }
)

DEFAULT_PREFIXES: Tuple[str, ...] = ("sys/", "linux/", "mach/", "boost/")


class KnownHeaders:
    """Membership test for include texts that name external headers."""

    def __init__(
        self,
        extra: Optional[Iterable[str]] = None,
        prefixes: Optional[Iterable[str]] = None,
    ) -> None:
        self._headers = set(C_HEADERS | CXX_HEADERS | POSIX_HEADERS)
        self._headers.update(extra or ())
        self._prefixes = tuple(DEFAULT_PREFIXES) + tuple(prefixes or ())

    def is_known(self, include_text: str) -> bool:
        if include_text in self._headers:
            return True
        return include_text.startswith(self._prefixes)

    def __contains__(self, include_text: object) -> bool:
        return isinstance(include_text, str) and self.is_known(include_text)

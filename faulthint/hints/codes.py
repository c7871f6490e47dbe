from types import MappingProxyType

FILE_SYSTEM_CATEGORY = "FileSystemError"
NETWORKING_CATEGORY = "NetworkingError"

_FILE_SYSTEM_CODES = (
    "ENOENT",
    "EACCES",
    "EPERM",
    "EEXIST",
    "EISDIR",
    "ENOTDIR",
    "EBUSY",
    "EMFILE",
    "ENFILE",
    "ENOSPC",
    "EROFS",
    "ENOTEMPTY",
)

_NETWORKING_CODES = (
    "ECONNREFUSED",
    "EADDRINUSE",
    "EADDRNOTAVAIL",
    "ENOTFOUND",
    "ETIMEDOUT",
    "ECONNRESET",
    "ECONNABORTED",
    "EPIPE",
    "EHOSTUNREACH",
    "ENETUNREACH",
    "EPROTO",
    "EAI_NONAME",
    "EAI_AGAIN",
    "EAI_FAIL",
)

CODE_CATEGORIES: MappingProxyType[str, str] = MappingProxyType(
    {
        **{code: FILE_SYSTEM_CATEGORY for code in _FILE_SYSTEM_CODES},
        **{code: NETWORKING_CATEGORY for code in _NETWORKING_CODES},
    }
)


def category_for_code(code: str | None) -> str | None:
    """Map a system error code such as ``ENOENT`` to its hint category."""
    if not code:
        return None
    return CODE_CATEGORIES.get(code)

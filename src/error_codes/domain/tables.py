"""Static error tables, one ordered tuple per domain.

Table order is significant: listing and searching follow it, and code
lookups return the first entry carrying a code. Names are unique within
a table under case-insensitive comparison.
"""

from __future__ import annotations

import errno

from error_codes.domain.types import Domain, Entry

# libeconf: enum econf_err
ECONF_ENTRIES: tuple[Entry, ...] = (
    Entry("ECONF_SUCCESS", 0),
    Entry("ECONF_ERROR", 1),
    Entry("ECONF_NOMEM", 2),
    Entry("ECONF_NOFILE", 3),
    Entry("ECONF_NOGROUP", 4),
    Entry("ECONF_NOKEY", 5),
    Entry("ECONF_EMPTYKEY", 6),
    Entry("ECONF_WRITEERROR", 7),
    Entry("ECONF_PARSE_ERROR", 8),
    Entry("ECONF_MISSING_BRACKET", 9),
    Entry("ECONF_MISSING_DELIMITER", 10),
    Entry("ECONF_EMPTY_SECTION_NAME", 11),
    Entry("ECONF_TEXT_AFTER_SECTION", 12),
    Entry("ECONF_FILE_LIST_IS_NULL", 13),
    Entry("ECONF_WRONG_BOOLEAN_VALUE", 14),
    Entry("ECONF_KEY_HAS_NULL_VALUE", 15),
    Entry("ECONF_WRONG_OWNER", 16),
    Entry("ECONF_WRONG_GROUP", 17),
    Entry("ECONF_WRONG_FILE_PERMISSION", 18),
    Entry("ECONF_WRONG_DIR_PERMISSION", 19),
    Entry("ECONF_ERROR_FILE_IS_SYM_LINK", 20),
    Entry("ECONF_PARSING_CALLBACK_FAILED", 21),
    Entry("ECONF_ARGUMENT_IS_NULL_VALUE", 22),
    Entry("ECONF_OPTION_NOT_FOUND", 23),
    Entry("ECONF_VALUE_CONVERSION_ERROR", 24),
)

# Linux-PAM: security/_pam_types.h
PAM_ENTRIES: tuple[Entry, ...] = (
    Entry("PAM_SUCCESS", 0),
    Entry("PAM_OPEN_ERR", 1),
    Entry("PAM_SYMBOL_ERR", 2),
    Entry("PAM_SERVICE_ERR", 3),
    Entry("PAM_SYSTEM_ERR", 4),
    Entry("PAM_BUF_ERR", 5),
    Entry("PAM_PERM_DENIED", 6),
    Entry("PAM_AUTH_ERR", 7),
    Entry("PAM_CRED_INSUFFICIENT", 8),
    Entry("PAM_AUTHINFO_UNAVAIL", 9),
    Entry("PAM_USER_UNKNOWN", 10),
    Entry("PAM_MAXTRIES", 11),
    Entry("PAM_NEW_AUTHTOK_REQD", 12),
    Entry("PAM_ACCT_EXPIRED", 13),
    Entry("PAM_SESSION_ERR", 14),
    Entry("PAM_CRED_UNAVAIL", 15),
    Entry("PAM_CRED_EXPIRED", 16),
    Entry("PAM_CRED_ERR", 17),
    Entry("PAM_NO_MODULE_DATA", 18),
    Entry("PAM_CONV_ERR", 19),
    Entry("PAM_AUTHTOK_ERR", 20),
    Entry("PAM_AUTHTOK_RECOVERY_ERR", 21),
    Entry("PAM_AUTHTOK_LOCK_BUSY", 22),
    Entry("PAM_AUTHTOK_DISABLE_AGING", 23),
    Entry("PAM_TRY_AGAIN", 24),
    Entry("PAM_IGNORE", 25),
    Entry("PAM_ABORT", 26),
    Entry("PAM_AUTHTOK_EXPIRED", 27),
    Entry("PAM_MODULE_UNKNOWN", 28),
    Entry("PAM_BAD_ITEM", 29),
    Entry("PAM_CONV_AGAIN", 30),
    Entry("PAM_INCOMPLETE", 31),
)

# <errno.h> names in Linux code order. Aliases follow their primary name
# so code lookups resolve to the primary.
_ERRNO_NAMES: tuple[str, ...] = (
    "EPERM",
    "ENOENT",
    "ESRCH",
    "EINTR",
    "EIO",
    "ENXIO",
    "E2BIG",
    "ENOEXEC",
    "EBADF",
    "ECHILD",
    "EAGAIN",
    "EWOULDBLOCK",
    "ENOMEM",
    "EACCES",
    "EFAULT",
    "ENOTBLK",
    "EBUSY",
    "EEXIST",
    "EXDEV",
    "ENODEV",
    "ENOTDIR",
    "EISDIR",
    "EINVAL",
    "ENFILE",
    "EMFILE",
    "ENOTTY",
    "ETXTBSY",
    "EFBIG",
    "ENOSPC",
    "ESPIPE",
    "EROFS",
    "EMLINK",
    "EPIPE",
    "EDOM",
    "ERANGE",
    "EDEADLK",
    "EDEADLOCK",
    "ENAMETOOLONG",
    "ENOLCK",
    "ENOSYS",
    "ENOTEMPTY",
    "ELOOP",
    "ENOMSG",
    "EIDRM",
    "ECHRNG",
    "EL2NSYNC",
    "EL3HLT",
    "EL3RST",
    "ELNRNG",
    "EUNATCH",
    "ENOCSI",
    "EL2HLT",
    "EBADE",
    "EBADR",
    "EXFULL",
    "ENOANO",
    "EBADRQC",
    "EBADSLT",
    "EBFONT",
    "ENOSTR",
    "ENODATA",
    "ETIME",
    "ENOSR",
    "ENONET",
    "ENOPKG",
    "EREMOTE",
    "ENOLINK",
    "EADV",
    "ESRMNT",
    "ECOMM",
    "EPROTO",
    "EMULTIHOP",
    "EDOTDOT",
    "EBADMSG",
    "EOVERFLOW",
    "ENOTUNIQ",
    "EBADFD",
    "EREMCHG",
    "ELIBACC",
    "ELIBBAD",
    "ELIBSCN",
    "ELIBMAX",
    "ELIBEXEC",
    "EILSEQ",
    "ERESTART",
    "ESTRPIPE",
    "EUSERS",
    "ENOTSOCK",
    "EDESTADDRREQ",
    "EMSGSIZE",
    "EPROTOTYPE",
    "ENOPROTOOPT",
    "EPROTONOSUPPORT",
    "ESOCKTNOSUPPORT",
    "EOPNOTSUPP",
    "ENOTSUP",
    "EPFNOSUPPORT",
    "EAFNOSUPPORT",
    "EADDRINUSE",
    "EADDRNOTAVAIL",
    "ENETDOWN",
    "ENETUNREACH",
    "ENETRESET",
    "ECONNABORTED",
    "ECONNRESET",
    "ENOBUFS",
    "EISCONN",
    "ENOTCONN",
    "ESHUTDOWN",
    "ETOOMANYREFS",
    "ETIMEDOUT",
    "ECONNREFUSED",
    "EHOSTDOWN",
    "EHOSTUNREACH",
    "EALREADY",
    "EINPROGRESS",
    "ESTALE",
    "EUCLEAN",
    "ENOTNAM",
    "ENAVAIL",
    "EISNAM",
    "EREMOTEIO",
    "EDQUOT",
    "ENOMEDIUM",
    "EMEDIUMTYPE",
    "ECANCELED",
    "ENOKEY",
    "EKEYEXPIRED",
    "EKEYREVOKED",
    "EKEYREJECTED",
    "EOWNERDEAD",
    "ENOTRECOVERABLE",
    "ERFKILL",
    "EHWPOISON",
)

# Codes come from the running platform, like the C headers they mirror.
# Names the platform does not define are left out.
ERRNO_ENTRIES: tuple[Entry, ...] = tuple(
    Entry(name, getattr(errno, name)) for name in _ERRNO_NAMES if hasattr(errno, name)
)

_TABLES: dict[Domain, tuple[Entry, ...]] = {
    Domain.ECONF: ECONF_ENTRIES,
    Domain.ERRNO: ERRNO_ENTRIES,
    Domain.PAM: PAM_ENTRIES,
}


def entries_for(domain: Domain) -> tuple[Entry, ...]:
    """Return the static table for *domain*."""
    return _TABLES[domain]

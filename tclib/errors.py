"""Error codes and their English messages."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class ErrorCode(IntEnum):
    """Error numbers, each carrying its English message."""

    message: str

    def __new__(cls, value: int, message: str) -> "ErrorCode":
        member = int.__new__(cls, value)
        member._value_ = value
        member.message = message
        return member

    OK = 0, "OK"
    EACCES = 1, "Permission denied"
    EADDRINUSE = 2, "Address in use"
    EADDRNOTAVAIL = 3, "Address not available"
    EAFNOSUPPORT = 4, "Address family not supported"
    EAGAIN = 5, (
        "Resource unavailable, try again "
        "(may be the same value as [EWOULDBLOCK])"
    )
    EALREADY = 6, "Connection already in progress"
    EBADF = 7, "Bad file descriptor"
    EBADMSG = 8, "Bad message"
    EBUSY = 9, "Device or resource busy"
    ECANCELED = 10, "Operation canceled"
    ECHILD = 11, "No child processes"
    ECONNABORTED = 12, "Connection aborted"
    ECONNREFUSED = 13, "Connection refused"
    ECONNRESET = 14, "Connection reset"
    EDEADLK = 15, "Resource deadlock would occur"
    EDESTADDRREQ = 16, "Destination address required"
    EDOM = 17, "Mathematics argument out of domain of function"
    EDQUOT = 18, "Reserved"
    EEXIST = 19, "File exists"
    EFAULT = 20, "Bad address"
    EFBIG = 21, "File too large"
    EHOSTUNREACH = 22, "Host is unreachable"
    EIDRM = 23, "Identifier removed"
    EILSEQ = 24, "Illegal byte sequence"
    EINPROGRESS = 25, "Operation in progress"
    EINTR = 26, "Interrupted function"
    EINVAL = 27, "Invalid argument"
    EIO = 28, "I/O error"
    EISCONN = 29, "Socket is connected"
    EISDIR = 30, "Is a directory"
    ELOOP = 31, "Too many levels of symbolic links"
    EMFILE = 32, "File descriptor value too large"
    EMLINK = 33, "Too many links"
    EMSGSIZE = 34, "Message too large"
    EMULTIHOP = 35, "Reserved"
    ENAMETOOLONG = 36, "Filename too long"
    ENETDOWN = 37, "Network is down"
    ENETRESET = 38, "Connection aborted by network"
    ENETUNREACH = 39, "Network unreachable"
    ENFILE = 40, "Too many files open in system"
    ENOBUFS = 41, "No buffer space available"
    ENODATA = 42, "No message is available on the STREAM head read queue"
    ENODEV = 43, "No such device"
    ENOENT = 44, "No such file or directory"
    ENOEXEC = 45, "Executable file format error"
    ENOLCK = 46, "No locks available"
    ENOLINK = 47, "Reserved"
    ENOMEM = 48, "Not enough space"
    ENOMSG = 49, "No message of the desired type"
    ENOPROTOOPT = 50, "Protocol not available"
    ENOSPC = 51, "No space left on device"
    ENOSR = 52, "No STREAM resources"
    ENOSTR = 53, "Not a STREAM"
    ENOSYS = 54, "Functionality not supported"
    ENOTCONN = 55, "The socket is not connected"
    ENOTDIR = 56, "Not a directory or a symbolic link to a directory"
    ENOTEMPTY = 57, "Directory not empty"
    ENOTRECOVERABLE = 58, "State not recoverable"
    ENOTSOCK = 59, "Not a socket"
    ENOTSUP = 60, "Not supported"
    ENOTTY = 61, "Inappropriate I/O control operation"
    ENXIO = 62, "No such device or address"
    EOPNOTSUPP = 63, "Operation not supported on socket"
    EOVERFLOW = 64, "Value too large to be stored in data type"
    EOWNERDEAD = 65, "Previous owner died"
    EPERM = 66, "Operation not permitted"
    EPIPE = 67, "Broken pipe"
    EPROTO = 68, "Protocol error"
    EPROTONOSUPPORT = 69, "Protocol not supported"
    EPROTOTYPE = 70, "Protocol wrong type for socket"
    ERANGE = 71, "Result too large"
    EROFS = 72, "Read-only file system"
    ESPIPE = 73, "Invalid seek"
    ESRCH = 74, "No such process"
    ESTALE = 75, "Reserved"
    ETIME = 76, "Stream ioctl() timeout"
    ETIMEDOUT = 77, "Connection timed out"
    ETXTBSY = 78, "Text file busy"
    EWOULDBLOCK = 79, "Operation would block"
    EGENERIC = 80, "Generic Error"


def strerror(code: int) -> str:
    """Return the message for an error code; unknown codes give the generic one."""
    try:
        return ErrorCode(code).message
    except ValueError:
        return ErrorCode.EGENERIC.message


def perror(code: int = ErrorCode.EGENERIC, file: TextIO | None = None) -> None:
    """Write the message for an error code, and a newline, to standard error."""
    stream = sys.stderr if file is None else file
    stream.write(strerror(code) + "\n")
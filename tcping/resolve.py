# tcping/resolve.py
import logging
import socket

from tcping.errors import ConfigError

log = logging.getLogger(__name__)


def resolve_address(host: str, port: str | int) -> tuple[int, tuple]:
    """
    Resolve host/port once and return (family, sockaddr) of the first result.
    Accepts hostnames, IPv4 and IPv6 literals (with or without brackets).
    """
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        infos = socket.getaddrinfo(host, int(port), type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError, ValueError, OverflowError) as e:
        log.debug("resolution of %s:%s failed: %s", host, port, e)
        raise ConfigError("Invalid host/port") from e

    if not infos:
        raise ConfigError("Unresolvable host/port")

    family, _type, _proto, _canon, sockaddr = infos[0]
    log.debug("resolved %s:%s -> %s", host, port, sockaddr)
    return family, sockaddr

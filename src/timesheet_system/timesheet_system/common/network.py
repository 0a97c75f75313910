from __future__ import annotations

import socket


def get_local_ip() -> str:
    """Best-effort LAN address used when printing shareable URLs."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # UDP connect sends nothing; it only selects the outbound interface.
        sock.connect(("10.255.255.255", 1))
        address = sock.getsockname()[0]
    except OSError:
        return "localhost"
    finally:
        sock.close()
    if address.startswith("127."):
        return "localhost"
    return address


def is_port_available(port: int, host: str = "0.0.0.0") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, int(port)))
        except OSError:
            return False
    return True


def find_available_port(start_port: int, max_port: int, host: str = "0.0.0.0") -> int:
    for port in range(int(start_port), int(max_port) + 1):
        if is_port_available(port, host):
            return port
    raise RuntimeError(f"No available ports found between {start_port} and {max_port}")

"""Serial debug bridge: trace a UART through a linked pseudo-terminal using socat."""

from debugserial.bridge import BridgeError, build_command, link_path, run_bridge

__all__ = ["BridgeError", "build_command", "link_path", "run_bridge"]

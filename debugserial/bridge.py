"""socat-based bridge between a linked pseudo-terminal and a serial UART."""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from debugserial.config import BAUD, LINK_NAME, SOCAT

logger = logging.getLogger("debugserial")

PathLike = Union[str, Path]


class BridgeError(RuntimeError):
    """The bridge process could not be started."""


def project_dir() -> Path:
    """Parent of the directory holding this package, independent of the cwd."""
    return Path(__file__).resolve().parent.parent


def link_path(root: Optional[PathLike] = None) -> Path:
    """Where socat places the pseudo-terminal symlink."""
    base = Path(root) if root is not None else project_dir()
    return base / LINK_NAME


def build_command(uart: str, link: PathLike) -> List[str]:
    """Argument vector for a hex/verbose traced PTY <-> UART bridge."""
    return [
        SOCAT,
        "-x",
        "-v",
        f"PTY,link={link},rawer,echo=0",
        f"FILE:{uart},rawer,echo=0,b{BAUD},nonblock",
    ]


def run_bridge(uart: str) -> int:
    """Run socat in the foreground until it exits; return its exit status."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    link = link_path()
    cmd = build_command(uart, link)
    logger.info("Bridging %s @ %s baud to %s", uart, BAUD, link)
    try:
        result = subprocess.run(cmd)
    except FileNotFoundError as e:
        raise BridgeError(f"{SOCAT} not found on PATH") from e
    except KeyboardInterrupt:
        logger.info("Bridge interrupted")
        return 130
    status = result.returncode
    if status < 0:
        # killed by a signal; report it the way a shell does
        status = 128 - status
    if status != 0:
        logger.warning("%s exited with status %s", SOCAT, status)
    else:
        logger.info("Bridge closed")
    return status

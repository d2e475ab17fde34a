"""Package installation for direnv and devbox."""

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..errors import PackageInstallError, UnsupportedOSError
from .cli import find_tool
from .logging import get_logger
from .models import ExecutionResult, OSKind
from .utils import format_command, strip_ansi, tail_lines

# Installed by the system package manager, in this order.
REQUIRED_PACKAGES = ("curl", "git", "direnv")


@dataclass(frozen=True)
class PackageManager:
    """How one package manager installs packages."""

    install: tuple[str, ...]
    refresh: tuple[str, ...] = ()
    name_prefix: str = ""


_APT = PackageManager(
    install=("sudo", "apt-get", "install", "-y"),
    refresh=("sudo", "apt-get", "update"),
)
_DNF = PackageManager(install=("sudo", "dnf", "install", "-y"))
_PACMAN = PackageManager(install=("sudo", "pacman", "-Sy", "--noconfirm"))

# None marks kinds with no installation recipe.
PACKAGE_COMMANDS: dict[OSKind, Optional[PackageManager]] = {
    OSKind.UBUNTU: _APT,
    OSKind.DEBIAN: _APT,
    OSKind.FEDORA: _DNF,
    OSKind.RHEL: _DNF,
    OSKind.ARCH: _PACMAN,
    OSKind.MACOS: PackageManager(install=("brew", "install")),
    OSKind.NIXOS: PackageManager(install=("nix-env", "-iA"), name_prefix="nixos."),
    OSKind.LINUX: None,
    OSKind.UNKNOWN: None,
}


def package_commands(os_kind: OSKind, packages: Sequence[str] = REQUIRED_PACKAGES) -> list[list[str]]:
    """Get the commands that install ``packages`` on ``os_kind``.

    An empty ``packages`` gives no commands, not even the index refresh.

    Raises:
        UnsupportedOSError: If there is no recipe for the OS.
    """
    manager = PACKAGE_COMMANDS[os_kind]
    if manager is None:
        raise UnsupportedOSError(f"Unsupported operating system: {os_kind.value}")
    if not packages:
        return []

    commands = []
    if manager.refresh:
        commands.append(list(manager.refresh))
    commands.append([*manager.install, *(manager.name_prefix + name for name in packages)])
    return commands


def run_command(
    cmd: Union[list[str], str],
    timeout: float = 600,
    shell: bool = False,
) -> ExecutionResult:
    """Run a command to completion and capture its output.

    Args:
        cmd: Argument list, or a command string when ``shell`` is set.
        timeout: Seconds before the command is killed.
        shell: Run through the system shell (needed for pipelines).

    Returns:
        ExecutionResult; timeouts and launch failures have return_code -1.
    """
    logger = get_logger()
    shown = format_command(cmd)
    argv = [shown] if shell else list(cmd)
    logger.info(f"Running: {shown}")

    try:
        completed = subprocess.run(
            cmd,
            shell=shell,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.error(f"Timed out after {timeout} seconds: {shown}")
        return ExecutionResult(
            success=False,
            output="",
            error=f"Command timed out after {timeout} seconds: {shown}",
            return_code=-1,
            command=argv,
        )
    except OSError as e:
        logger.error(f"Failed to launch {shown}: {e}")
        return ExecutionResult(
            success=False,
            output="",
            error=f"Failed to run {shown}: {e}",
            return_code=-1,
            command=argv,
        )

    stdout = strip_ansi(completed.stdout or "")
    stderr = strip_ansi(completed.stderr or "")

    if completed.returncode != 0:
        logger.error(f"Command failed with exit code {completed.returncode}: {shown}")
        return ExecutionResult(
            success=False,
            output=stdout,
            error=tail_lines(stderr) or f"exit code {completed.returncode}",
            return_code=completed.returncode,
            command=argv,
        )

    return ExecutionResult(
        success=True,
        output=stdout,
        return_code=0,
        command=argv,
    )


def install_direnv(os_kind: OSKind, timeout: float = 600, skip_installed: bool = True) -> list[str]:
    """Install prerequisites and direnv with the system package manager.

    With ``skip_installed``, each of curl, git and direnv that is already
    on the system is left out, so a present direnv does not stop a missing
    curl from being installed.

    Returns:
        Progress messages.

    Raises:
        UnsupportedOSError: If there is no recipe for the OS.
        PackageInstallError: On the first failing command.
    """
    # Fail on unsupported systems before looking up tools
    package_commands(os_kind, ())
    steps_output = []

    packages = list(REQUIRED_PACKAGES)
    if skip_installed:
        packages = []
        for name in REQUIRED_PACKAGES:
            existing = find_tool(name)
            if existing:
                steps_output.append(f"✓ {name} already installed at {existing}")
            else:
                packages.append(name)
        if not packages:
            return steps_output

    for cmd in package_commands(os_kind, packages):
        steps_output.append(f"▸ {format_command(cmd)}")
        result = run_command(cmd, timeout=timeout)
        if not result.success:
            raise PackageInstallError(
                f"Installation failed: {format_command(cmd)}: {result.error}",
                result=result,
            )

    steps_output.append(f"✓ {', '.join(packages)} installed")
    return steps_output


def install_devbox(installer_url: str, timeout: float = 600, skip_installed: bool = True) -> list[str]:
    """Install devbox with its official remote installer script.

    The script is run with ``-f`` so it does not wait for a confirmation
    that nobody can give.

    Raises:
        PackageInstallError: If the installer fails.
    """
    steps_output = []

    if skip_installed:
        existing = find_tool("devbox")
        if existing:
            steps_output.append(f"✓ devbox already installed at {existing}")
            return steps_output

    install_cmd = f"curl -fsSL {installer_url} | bash -s -- -f"
    steps_output.append(f"▸ {install_cmd}")
    result = run_command(install_cmd, timeout=timeout, shell=True)
    if not result.success:
        raise PackageInstallError(
            f"Installation failed: {install_cmd}: {result.error}",
            result=result,
        )

    steps_output.append("✓ devbox installed")
    return steps_output

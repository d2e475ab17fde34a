"""Idempotent shell startup file editing.

Each hook is appended as a blank separator line, a provenance comment and
the hook statement. A hook whose marker is already present in the file is
left alone, so running the editor repeatedly yields the same file as running
it once. Existing content is never rewritten or truncated.
"""

from pathlib import Path
from typing import Optional

from ..errors import ConfigFileError, UnsupportedShellError
from .logging import get_logger
from .models import HookLine, HookOutcome, ShellKind

# Startup file for each shell, relative to the home directory.
SHELL_CONFIG_FILES = {
    ShellKind.BASH: ".bashrc",
    ShellKind.ZSH: ".zshrc",
    ShellKind.FISH: ".config/fish/config.fish",
}

DIRENV_HOOK = HookLine(
    name="direnv",
    marker="direnv hook",
    comment="# direnv hook (added by install script)",
    lines={
        ShellKind.BASH: 'eval "$(direnv hook bash)"',
        ShellKind.ZSH: 'eval "$(direnv hook zsh)"',
        ShellKind.FISH: "direnv hook fish | source",
    },
)

DEVBOX_HOOK = HookLine(
    name="devbox",
    marker="devbox global shellenv",
    comment="# Enable devbox globally (added by install script)",
    lines={
        ShellKind.BASH: 'eval "$(devbox global shellenv)"',
        ShellKind.ZSH: 'eval "$(devbox global shellenv)"',
        ShellKind.FISH: "devbox global shellenv | source",
    },
)

DEFAULT_HOOKS = (DIRENV_HOOK, DEVBOX_HOOK)


def config_file_for(
    shell: ShellKind,
    home: Optional[Path] = None,
    overrides: Optional[dict[str, str]] = None,
) -> Path:
    """Get the startup file for a shell.

    Args:
        shell: Detected shell.
        home: Home directory; defaults to ``Path.home()``.
        overrides: Optional shell name -> path (relative to home) mapping
            that replaces entries of SHELL_CONFIG_FILES.

    Raises:
        UnsupportedShellError: If the shell has no known startup file.
    """
    relative = None
    if overrides and shell.value in overrides:
        relative = overrides[shell.value]
    elif shell in SHELL_CONFIG_FILES:
        relative = SHELL_CONFIG_FILES[shell]

    if shell is ShellKind.UNKNOWN or not relative:
        raise UnsupportedShellError(
            f"Cannot determine the startup file for shell '{shell.value}'"
        )

    if home is None:
        home = Path.home()
    return Path(home) / Path(relative).expanduser()


def _search_text(hook: HookLine, shell: ShellKind, strict: bool) -> str:
    if strict:
        return hook.render(shell)
    return hook.marker


def ensure_hook(
    shell: ShellKind,
    home: Optional[Path] = None,
    hooks: tuple[HookLine, ...] = DEFAULT_HOOKS,
    strict: bool = False,
    overrides: Optional[dict[str, str]] = None,
) -> list[HookOutcome]:
    """Append each hook to the shell's startup file unless already present.

    With ``strict`` off, a hook counts as present when its marker substring
    appears anywhere in the file, regardless of formatting or of which
    shell the existing line was written for. With ``strict`` on, the exact
    statement for this shell must appear.

    Bytes that are not valid UTF-8 are carried through unchanged.

    Returns:
        One HookOutcome per hook, in order.

    Raises:
        UnsupportedShellError: Before touching the filesystem, if the shell
            has no startup file or no hook statement.
        ConfigFileError: If the file or its parent directories cannot be
            created, read or written.
    """
    logger = get_logger()
    path = config_file_for(shell, home, overrides)

    for hook in hooks:
        if hook.render(shell) is None:
            raise UnsupportedShellError(
                f"No {hook.name} hook is defined for shell '{shell.value}'"
            )

    outcomes = []
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a+", encoding="utf-8", errors="surrogateescape") as f:
            f.seek(0)
            content = f.read()

            for hook in hooks:
                if _search_text(hook, shell, strict) in content:
                    logger.info(f"{hook.name} hook already present in {path}, skipping")
                    outcomes.append(HookOutcome(hook=hook.name, path=path, added=False))
                    continue

                block = ""
                if content and not content.endswith("\n"):
                    block += "\n"
                block += f"\n{hook.comment}\n{hook.render(shell)}\n"

                # Append mode writes at the end regardless of the read position
                f.write(block)
                f.flush()
                content += block

                logger.info(f"Added {hook.name} hook to {path}")
                outcomes.append(HookOutcome(hook=hook.name, path=path, added=True))
    except OSError as e:
        raise ConfigFileError(f"Failed to update {path}: {e}") from e

    return outcomes


def hooks_status(
    shell: ShellKind,
    home: Optional[Path] = None,
    hooks: tuple[HookLine, ...] = DEFAULT_HOOKS,
    strict: bool = False,
    overrides: Optional[dict[str, str]] = None,
) -> dict[str, bool]:
    """Report which hooks are present in the shell's startup file.

    Read-only; a missing file means no hook is present.

    Raises:
        UnsupportedShellError: If the shell has no startup file.
        ConfigFileError: If the file exists but cannot be read.
    """
    path = config_file_for(shell, home, overrides)
    try:
        content = path.read_text(encoding="utf-8", errors="surrogateescape")
    except FileNotFoundError:
        content = ""
    except OSError as e:
        raise ConfigFileError(f"Failed to read {path}: {e}") from e

    status = {}
    for hook in hooks:
        search = _search_text(hook, shell, strict)
        status[hook.name] = search is not None and search in content
    return status


def manual_instructions(shell_name: Optional[str] = None) -> str:
    """Instructions for hooking the tools in by hand."""
    shown = shell_name or "your shell"
    lines = [
        f"Could not configure {shown} automatically.",
        "Add the following to your shell startup file:",
        "",
        "  bash (~/.bashrc):",
        f"    {DIRENV_HOOK.render(ShellKind.BASH)}",
        f"    {DEVBOX_HOOK.render(ShellKind.BASH)}",
        "",
        "  zsh (~/.zshrc):",
        f"    {DIRENV_HOOK.render(ShellKind.ZSH)}",
        f"    {DEVBOX_HOOK.render(ShellKind.ZSH)}",
        "",
        "  fish (~/.config/fish/config.fish):",
        f"    {DIRENV_HOOK.render(ShellKind.FISH)}",
        f"    {DEVBOX_HOOK.render(ShellKind.FISH)}",
    ]
    return "\n".join(lines)

import os
import stat
from pathlib import Path

from claude_sync.errors import SymlinkConflictError
from claude_sync.models import Action, ActionKind, ActionStatus, SkillRef

_SYMLINK_DETAILS = {
    ActionStatus.CREATE: "create symlink",
    ActionStatus.FIX: "replace link",
    ActionStatus.NOOP: "already linked",
}


def is_valid_skill_name(name: str) -> bool:
    """Return False for names that could escape the skills directory."""
    if not name:
        return False
    if "/" in name or "\\" in name:
        return False
    if ".." in name:
        return False
    if "\0" in name:
        return False
    if name in (".", ".."):
        return False
    return True


def force_symlink(source: Path, target: Path) -> ActionStatus:
    """Point ``target`` at ``source``, replacing a previous link or file.

    Real directories are never removed. Returns NOOP when ``target`` already
    links to ``source``, CREATE when nothing existed at ``target`` and FIX
    when an existing entry was replaced.
    """
    try:
        info = os.lstat(target)
    except FileNotFoundError:
        status = ActionStatus.CREATE
    else:
        if stat.S_ISDIR(info.st_mode):
            raise SymlinkConflictError(target)
        if stat.S_ISLNK(info.st_mode) and os.readlink(target) == str(source):
            return ActionStatus.NOOP
        # stale symlinks and plain files
        target.unlink()
        status = ActionStatus.FIX
    os.symlink(source, target)
    return status


def link_skills(
    skills: list[SkillRef], skills_dir: Path
) -> tuple[list[Action], list[str]]:
    """Link every safely named skill into ``skills_dir``.

    Returns (actions, skipped_messages).
    """
    skills_dir.mkdir(parents=True, exist_ok=True)
    actions: list[Action] = []
    skipped: list[str] = []
    for skill in skills:
        if not is_valid_skill_name(skill.name):
            skipped.append(f"Skipping skill with invalid name: {skill.name!r}")
            continue
        target = skills_dir / skill.name
        status = force_symlink(skill.source_dir, target)
        actions.append(
            Action(
                ActionKind.SYMLINK,
                target,
                status,
                _SYMLINK_DETAILS[status],
                source=skill.source_dir,
            )
        )
    return actions, skipped

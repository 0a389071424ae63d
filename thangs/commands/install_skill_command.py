"""
Handles the 'install-skill' command: copies the bundled Claude skill
files into the user's skills directory.
"""
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..utils.config import get_skill_dir
from ..utils.logger import get_logger
from ..utils.output import display_error, display_json, display_success

log = get_logger(__name__)

SKILL_SOURCE = Path(__file__).resolve().parent.parent / "skill"


def _skill_files(source: Path) -> List[Path]:
    return sorted(p for p in source.rglob("*") if p.is_file() and "__pycache__" not in p.parts)


def install_skill(force: bool = False, source: Optional[Path] = None, target: Optional[Path] = None) -> Dict[str, Any]:
    """Copy the skill into *target*; refuses to overwrite unless *force*."""
    source = source or SKILL_SOURCE
    target = target or get_skill_dir()

    if not source.is_dir():
        return {"success": False, "error": f"Skill files not found at {source}"}
    if target.exists() and not force:
        return {
            "success": False,
            "error": f"Skill already installed at {target}. Use --force to overwrite.",
        }

    installed = []
    try:
        if target.exists():
            shutil.rmtree(target)
        for path in _skill_files(source):
            relative = path.relative_to(source)
            destination = target / relative
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(path, destination)
            installed.append(str(relative))
    except OSError as e:
        log.debug("Skill installation failed", exc_info=True)
        return {"success": False, "error": f"Installation failed: {e}"}

    return {
        "success": True,
        "message": "Skill installed successfully",
        "installPath": str(target),
        "files": installed,
    }


def handle_install_skill(args):
    result = install_skill(force=getattr(args, 'force', False))

    if getattr(args, 'json_output', False):
        display_json(result)
    elif result["success"]:
        display_success(result["message"])
        print(f"Installation path: {result['installPath']}")
        if result["files"]:
            print(f"\nInstalled files ({len(result['files'])}):")
            for name in result["files"]:
                print(f"  - {name}")
    else:
        display_error(result["error"])
    return result["success"]

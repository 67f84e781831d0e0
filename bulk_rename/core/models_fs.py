"""
models_fs.py - Core Data Structure Definitions

Contains:
- RenameOptions: Rename options configuration
- FileItem: File information
- RenameOp: Single rename operation
- RenamePlan: Batch rename plan
- SequenceFormat: Zero-padded sequence numbering
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Sequence
import platform

from .errors import LengthMismatchFault


def is_case_insensitive_fs() -> bool:
    """Detect if current filesystem is case-insensitive"""
    return platform.system() in ("Windows", "Darwin")


def normalize_for_comparison(name: str, case_insensitive: bool) -> str:
    """Normalize filename for comparison"""
    if case_insensitive:
        return name.casefold()
    return name


@dataclass(frozen=True)
class RenameOptions:
    """Rename options configuration"""
    source_dir: Path = Path(".")    # Directory to scan (non-recursive)
    file_pattern: str = "*"         # Shell-style glob, e.g. *.jpg
    sort_by_number: bool = False    # Sort by the last number in the filename
    prefix: Optional[str] = None    # Literal text put in front of new names
    use_original_name: bool = False # Keep original stem in new names
    add_sequence: bool = False      # Append zero-padded sequence number

    # Duplicate detection ignores case (Windows/macOS default to insensitive)
    case_insensitive_detect: bool = field(default_factory=is_case_insensitive_fs)


@dataclass(frozen=True)
class FileItem:
    """File information data class"""
    path: Path                      # Full path at discovery time

    @classmethod
    def from_path(cls, p: Path) -> "FileItem":
        """Create FileItem from Path object"""
        return cls(path=Path(p))

    @property
    def name(self) -> str:
        """Filename (with suffix)"""
        return self.path.name

    @property
    def _is_dotfile(self) -> bool:
        # .profile is all extension, .config.bak splits as usual
        name = self.path.name
        return name.startswith(".") and name.count(".") == 1 and len(name) > 1

    @property
    def stem(self) -> str:
        """Filename (without suffix), empty for dotfiles like .profile"""
        if self._is_dotfile:
            return ""
        return self.path.stem

    @property
    def suffix(self) -> str:
        """Suffix including the dot (e.g., .png, .profile), empty if none"""
        if self._is_dotfile:
            return self.path.name
        return self.path.suffix


@dataclass(frozen=True)
class SequenceFormat:
    """Sequence numbering, padded to the digit count of the file count"""
    width: int

    @classmethod
    def for_count(cls, count: int) -> "SequenceFormat":
        return cls(width=len(str(count)))

    def format(self, number: int) -> str:
        return str(number).zfill(self.width)


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    new_name: str                   # New filename (same directory)

    @property
    def dst(self) -> Path:
        """Destination path"""
        return self.src.parent / self.new_name

    @property
    def is_same(self) -> bool:
        """Whether source and destination are the same"""
        return self.src.name == self.new_name

    @property
    def is_case_only_change(self) -> bool:
        """Whether it's only a case change"""
        return (self.src.name.lower() == self.new_name.lower() and
                self.src.name != self.new_name)


@dataclass
class RenamePlan:
    """Batch rename plan, index-aligned with the sorted file list"""
    ops: List[RenameOp] = field(default_factory=list)
    options: RenameOptions = field(default_factory=RenameOptions)

    @classmethod
    def from_pairs(
        cls,
        old_paths: Sequence[Path],
        new_names: Sequence[str],
        options: Optional[RenameOptions] = None,
    ) -> "RenamePlan":
        """Pair source paths with new names, rejecting mismatched lengths"""
        if len(old_paths) != len(new_names):
            raise LengthMismatchFault(len(old_paths), len(new_names))
        plan = cls(options=options or RenameOptions())
        for src, new_name in zip(old_paths, new_names):
            plan.add_op(Path(src), new_name)
        return plan

    @property
    def old_paths(self) -> List[Path]:
        return [op.src for op in self.ops]

    @property
    def new_names(self) -> List[str]:
        return [op.new_name for op in self.ops]

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.ops)

    @property
    def changed_count(self) -> int:
        """Operations that actually change a name"""
        return sum(1 for op in self.ops if not op.is_same)

    def add_op(self, src: Path, new_name: str) -> None:
        """Add operation"""
        self.ops.append(RenameOp(src=src, new_name=new_name))

    def __len__(self) -> int:
        return len(self.ops)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Rename Plan Summary:",
            f"  - Total operations: {self.total_count}",
            f"  - Name changes: {self.changed_count}",
        ]
        return "\n".join(lines)

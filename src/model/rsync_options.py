"""Rsync option set: eleven independent toggles plus exclusion patterns."""

from __future__ import annotations

import copy

from model.ui_field import ConfigBase, Field, UIField


def _exclude_args(patterns: list[str]) -> list[str]:
    args = []
    for pattern in patterns:
        args.extend(["--exclude", pattern])
    return args


class RsyncOptions(ConfigBase):
    """The toggleable rsync flags of a session.

    Declaration order is the canonical order: it defines both the toggle
    index of each flag and the order its tokens appear in the command.
    """

    archive = UIField(
        type_=bool,
        default=True,
        key="a",
        label="Archive",
        explanation="Recurse and preserve permissions, times, links and devices",
        rsync_flag="-a",
    )
    verbose = UIField(
        type_=bool,
        default=True,
        key="v",
        label="Verbose",
        explanation="List files as they are transferred",
        rsync_flag="-v",
    )
    compress = UIField(
        type_=bool,
        default=False,
        key="z",
        label="Compress",
        explanation="Compress file data during the transfer",
        rsync_flag="-z",
    )
    dry_run = UIField(
        type_=bool,
        default=False,
        key="n",
        label="Dry-run",
        explanation="Show what would be transferred without changing anything",
        rsync_flag="-n",
    )
    progress = UIField(
        type_=bool,
        default=True,
        key="p",
        label="Progress/file",
        explanation="Show progress for each file",
        rsync_flag="--progress",
    )
    delete = UIField(
        type_=bool,
        default=False,
        key="d",
        label="Delete",
        explanation="Delete files in the destination that are missing from the source",
        rsync_flag="--delete",
    )
    human_readable = UIField(
        type_=bool,
        default=True,
        key="h",
        label="Human",
        explanation="Print sizes and rates in human-readable units",
        rsync_flag="-h",
    )
    use_ssh = UIField(
        type_=bool,
        default=False,
        key="e",
        label="SSH",
        explanation="Use ssh as the remote shell",
        rsync_args=lambda v: ["-e", "ssh"] if v else [],
    )
    delete_source = UIField(
        type_=bool,
        default=False,
        key="r",
        label="DelSrc",
        explanation="Remove source files once they are transferred",
        rsync_flag="--remove-source-files",
    )
    delete_excluded = UIField(
        type_=bool,
        default=False,
        key="x",
        label="DelExcl",
        explanation="Also delete excluded files from the destination",
        rsync_flag="--delete-excluded",
    )
    progress_per_file = UIField(
        type_=bool,
        default=False,
        key="f",
        label="GlobalProgress",
        explanation="Show a single progress line for the whole transfer",
        rsync_flag="--info=progress2",
    )

    exclude = Field(
        type_=list,
        default_factory=list,
        rsync_args=_exclude_args,
    )

    @classmethod
    def flag_names(cls) -> list[str]:
        """Flag names in toggle-index order."""
        return list(cls.get_ui_fields())

    def toggle(self, index: int) -> None:
        """Flip the flag at `index`. Out-of-range indices are ignored."""
        names = self.flag_names()
        if 0 <= index < len(names):
            name = names[index]
            setattr(self, name, not getattr(self, name))

    def clone(self) -> RsyncOptions:
        """Return an independent copy (no shared exclusion list)."""
        return copy.deepcopy(self)

    def enabled_labels(self) -> list[str]:
        """Labels of every enabled flag, in canonical order."""
        return [
            field.label
            for name, field in self.get_ui_fields().items()
            if getattr(self, name)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RsyncOptions):
            return NotImplemented
        return all(
            getattr(self, name) == getattr(other, name)
            for name in self.get_all_fields()
        )

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.get_all_fields())
        return f"RsyncOptions({values})"

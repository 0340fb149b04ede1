"""Git interface layer — read file versions from the repository."""

from linediff.git.adapter import GitError, get_repo_root, relative_to_repo, show_file

__all__ = [
    "GitError",
    "get_repo_root",
    "relative_to_repo",
    "show_file",
]

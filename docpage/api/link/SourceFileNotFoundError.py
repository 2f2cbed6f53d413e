"""Referenced source file is missing."""

from .LinkRewriteError import LinkRewriteError


class SourceFileNotFoundError(LinkRewriteError, FileNotFoundError):
    """A source link points at a file that does not exist under the base directory."""

    def __init__(self, path: str, base_dir: str):
        self.path = path
        self.base_dir = base_dir
        super().__init__(f"Source file not found: {path} (base directory: {base_dir})")

"""
Local link resolution

Relative markdown links are rendered as \\hyperref cross references. The
reference target is the title of the linked document, found by searching
a document tree for a file whose path ends with the link URL.
"""

import os
from pathlib import Path
from typing import Iterator, Optional, Union

from .log import LOG
from .titles import title_fromPath


NETWORK_SCHEME = "http"


def url_isNetwork(url: str) -> bool:
    """True for absolute network links (http://, https://)"""
    return url.startswith(NETWORK_SCHEME)


def url_stripParents(url: str) -> str:
    """Remove every '../' segment from a relative URL"""
    return url.replace("../", "")


class LinkResolver:
    """
    Resolves relative link URLs to cross-reference titles

    Attributes:
        root: Document tree searched for link targets

    Example:
        >>> resolver = LinkResolver("docs/src")
        >>> resolver.target_resolve("../chapter/intro.md")   # doctest: +SKIP
        'Introduction'
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)

    def files_walk(self) -> Iterator[Path]:
        """Yield every file under root, depth-first in sorted order"""
        if not self.root.is_dir():
            return
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames.sort()
            for filename in sorted(filenames):
                yield Path(dirpath) / filename

    def path_find(self, url: str) -> Optional[Path]:
        """
        Find the first file whose path ends with the (parent-stripped) URL

        Args:
            url: Relative link URL

        Returns:
            Matching file path, or None
        """
        suffix = url_stripParents(url)
        if not suffix:
            return None

        for path in self.files_walk():
            if path.as_posix().endswith(suffix):
                return path
        return None

    def title_resolve(self, url: str) -> Optional[str]:
        """Title of the linked document, or None when no file matches"""
        path = self.path_find(url)
        if path is None:
            return None
        title = title_fromPath(path)
        LOG(f"Resolved link '{url}' via {path} to title '{title}'", level=2)
        return title

    def target_resolve(self, url: str) -> str:
        """
        Cross-reference label text for a local link

        Falls back to the URL with '#' removed when no document matches.
        """
        title = self.title_resolve(url)
        if title is None:
            LOG(f"No document found for link '{url}'", level=2)
            return url.replace("#", "")
        return title

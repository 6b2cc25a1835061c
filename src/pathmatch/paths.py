"""Slash-delimited path string helpers.

The matcher and cursor only ever see segment sequences; these helpers are
the single place where raw path strings are taken apart and put back
together.
"""

from collections.abc import Iterable


def split(path: str) -> list[str]:
    """Split *path* into its non-empty segments.

    Leading, trailing, and repeated slashes never produce empty segments::

        split("/users//alice/")  -> ["users", "alice"]
        split("/")               -> []
    """
    return [part for part in path.split("/") if part]


def join(segments: Iterable[str]) -> str:
    """Join *segments* into a path with a single leading slash.

    Empty segments are skipped and each segment is stripped of surrounding
    slashes, so ``join(["a", "", "/b/"]) == "/a/b"``. No segments gives ``/``.
    """
    parts = [s.strip("/") for s in segments]
    return "/" + "/".join(p for p in parts if p)


def normalize(path: str) -> str:
    """Return the canonical form of *path* (``split`` then ``join``).

    The empty string stays empty; any other all-slash path becomes ``/``.
    """
    if not path:
        return ""
    return join(split(path))

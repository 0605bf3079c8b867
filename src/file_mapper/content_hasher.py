"""Content digests used to decide whether a document changed."""

import hashlib
from typing import Union


class ContentHasher:
    """Computes SHA-256 digests of document content.

    A new hash object is created for every call, so no state carries over
    between digests. Equal digests are the only criterion for "unchanged":
    whitespace or formatting edits count as changes.
    """

    algorithm = 'sha256'

    def digest(self, content: Union[str, bytes]) -> bytes:
        """Return the digest of content (str is encoded as UTF-8)."""
        if isinstance(content, str):
            content = content.encode('utf-8')
        return hashlib.new(self.algorithm, content).digest()

    def same_content(self, left: Union[str, bytes], right: Union[str, bytes]) -> bool:
        return self.digest(left) == self.digest(right)

"""Detection of addresses inside extracted text fragments.

This package decides whether a fragment is a code artifact rather than
translatable prose:
- is_url: Internet addresses (protocol-prefixed or bare domains)
- is_file_address: URLs plus UNC/Windows/UNIX paths, file names, and email
"""

from transguard.classifier.address import is_url, is_file_address

__all__ = [
    "is_url",
    "is_file_address",
]

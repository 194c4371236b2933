"""chunkguard: structural integrity checks for PNG files.

Parses a byte stream into a signature plus CRC-checked chunks, and flags:
  - signatures mangled by text-mode line-ending conversion
  - chunks truncated mid-stream
  - chunks whose declared length or CRC-32 disagrees with their data
"""

__version__ = "0.1.0"
__description__ = "Detect PNG signature mangling and chunk corruption"

from chunkguard.core.decoder import decode, decode_file
from chunkguard.core.errors import ErrorKind
from chunkguard.core.signature import collect_signature, validate_signature
from chunkguard.core.verifier import verify_container, verify_record
from chunkguard.models.container import Chunk, DecodedContainer, Signature

__all__ = [
    "Chunk",
    "DecodedContainer",
    "ErrorKind",
    "Signature",
    "collect_signature",
    "decode",
    "decode_file",
    "validate_signature",
    "verify_container",
    "verify_record",
    "__version__",
]

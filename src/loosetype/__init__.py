"""loosetype

Loose-typing value conversions for scripted runtimes. Values produced by a
block-based scripting environment are untyped; the ``cast``, ``color`` and
``sanitizer`` namespaces turn them into well-defined numbers, booleans,
text, colours and null-free containers.
"""

from loosetype import cast, color, sanitizer
from loosetype.utils.uid import uid
from loosetype.utils.xml_escape import xml_escape

__all__ = ["__version__", "cast", "color", "sanitizer", "uid", "xml_escape"]
__version__ = "0.1.0"

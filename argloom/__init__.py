__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'argloom'
__author__ = 'argloom contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .accessor import *
from .faults import *
from .groups import *
from .kinds import *
from .loader import *
from .options import *
from .parser import *
from .positionals import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the declaration layer
__all__ += kinds.__all__  # type: ignore[attr-defined]
__all__ += options.__all__  # type: ignore[attr-defined]
__all__ += groups.__all__  # type: ignore[attr-defined]
__all__ += positionals.__all__  # type: ignore[attr-defined]
# Load the exposed API of the loading and read-back layer
__all__ += loader.__all__  # type: ignore[attr-defined]
__all__ += accessor.__all__  # type: ignore[attr-defined]
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]

"""eclipsegen -- Eclipse project metadata from Maven project layouts.

Derives source roots, resource roots, builders, natures and output locations
from a build project and renders them into Eclipse's ``.project`` and
``.classpath`` descriptor files.
"""

__version__ = "0.1.0"

"""Express backend scaffolding tool.

Creates a project folder with an Express app skeleton, initialises its
``package.json`` and installs the runtime and development dependencies.
"""

__version__ = "0.1.0"

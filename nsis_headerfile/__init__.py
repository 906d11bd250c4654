"""nsis-headerfile - NSIS project header generator.

Renders project metadata into a ``project.nsh`` file of ``!define`` lines
for inclusion from an NSIS installer script. Library users call
:func:`nsis_headerfile.rendering.engine.render`; ``main`` is the console
entry point.
"""

import logging

from .cli import main

__version__ = "0.1.0"
__all__ = ["__version__", "main"]

# Applications configure handlers; the library stays silent by default
logging.getLogger(__name__).addHandler(logging.NullHandler())

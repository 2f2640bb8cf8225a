"""console-tools — small console utilities built on a shared command router.

Ships an interactive calculator, a greet/add/now command CLI and a
file-inspection CLI with a strict layered architecture.
"""

from console_tools.version import __version__

__all__: list[str] = ["__version__"]

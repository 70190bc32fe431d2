"""
package: mstair.logwriter.base
"""

# <AUTOGEN_INIT>
from mstair.logwriter.base import (
    config,
    fs_helpers,
)


__all__ = [
    "config",
    "fs_helpers",
]
# </AUTOGEN_INIT>

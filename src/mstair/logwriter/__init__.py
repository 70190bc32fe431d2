"""
package: mstair.logwriter
"""

# <AUTOGEN_INIT>
from mstair.logwriter import (
    base,
    line_formatter,
    log_writer,
    output_flags,
    severity,
    writer_config,
    writer_factory,
)


__all__ = [
    "base",
    "line_formatter",
    "log_writer",
    "output_flags",
    "severity",
    "writer_config",
    "writer_factory",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"

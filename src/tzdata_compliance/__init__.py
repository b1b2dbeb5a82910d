"""tzdata compliance harness.

Validates that an installed time zone data module is compatible with the
platform release it ships in, and that every surface reporting the tzdb
version agrees with the module's version file.
"""

__version__ = "1.0.0"

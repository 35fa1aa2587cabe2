"""Logger lookup for Pepino modules.

Pepino logs two events and installs no handlers:

- ``pepino.matcher.classifiers.language`` (DEBUG): a ``# language:``
  pragma switched the active dialect.
- ``pepino.scanner`` (WARNING): a lenient scanner met an unknown language
  and kept the current dialect.

Enable them with ``logging.getLogger("pepino").setLevel(logging.DEBUG)``.
"""

from __future__ import annotations

import logging

_ROOT = "pepino"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``pepino`` hierarchy.

    Names outside the package (``"mymodule"``) are nested below it
    (``"pepino.mymodule"``); module ``__name__`` values pass through.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)

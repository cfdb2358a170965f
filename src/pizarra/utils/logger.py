"""Logger factory for Pizarra.

Every module logs under the ``pizarra`` namespace. The library never installs
handlers; applications decide where records go. Only debug records are
emitted:

- ``pizarra.escapes``: escape decoding hit ``max_escape_passes``
- ``pizarra.metadata``: why a metadata block was kept or what it held
  (only with ``SanitizeConfig(debug=True)``)

Example:
    >>> import logging
    >>> logging.getLogger("pizarra").setLevel(logging.DEBUG)  # see every record
    >>> get_logger("pizarra.metadata").getEffectiveLevel() == logging.DEBUG
    True
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Names outside the namespace get the "pizarra." prefix, so a bare
    module name and ``__name__`` both land under the package logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'pizarra.mymodule'
    """
    if not (name == "pizarra" or name.startswith("pizarra.")):
        name = f"pizarra.{name}"
    return logging.getLogger(name)

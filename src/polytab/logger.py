"""Package logger for polytab.

Two things are logged: building a difference table (``DEBUG``, with the
degree, initial point and step) and :func:`polytab.tabulation.tabulate`
being asked for fewer points than the table has entries (``WARNING``).
No handlers are installed; attach them to the ``"polytab"`` logger in the
calling application.
"""
import logging

logger_name = "polytab"
polytab_logger = logging.getLogger(logger_name)

"""assdialog: render ASS dialogue events through a text template.

Each ``Dialogue:`` line of an Advanced SubStation Alpha script is parsed into a
:class:`~assdialog.models.DialogueRecord`, optionally retimed for a new frame
rate, and written out through a format string such as
``"!start-!end\\t!actor\\t!text\\n"``.
"""

__version__ = "0.3.0"

from enum import Enum


class OutputStyle(Enum):
    """
    Textual rendering of a net — selects the layout produced by ``format``.
    """
    TERMINAL = "terminal"  # "<value>  // <comment>" lines
    NET = "net"            # net file: one line of reversed columns per matrix

"""
sway-scratch

Named scratchpad toggling for sway (and i3) driven by a single GET_TREE
snapshot: hide the scratchpads occupying the focused workspace, toggle the
requested one, and create it when it does not exist yet.
"""

__version__ = "0.3.0"
__author__ = "NixOS Configuration Team"
